"""
Response Helpers
Writes rendered views into Sanic responses
"""
import codecs
import re
from typing import Optional
from sanic.response import HTTPResponse


class ResponseHelper:
    """
    Response emitter for rendered views

    Example:
        response = ResponseHelper.emit(HTTPResponse(), '<h1>Hello</h1>')
        response.headers['Content-Length']  # '14'
    """

    CHARSET_RE = re.compile(r'charset\s*=\s*"?([^\s;"]+)', re.IGNORECASE)
    CHARSET_PARAM_RE = re.compile(r'charset\s*=\s*"?[^\s;"]+"?', re.IGNORECASE)

    @staticmethod
    def emit(response: Optional[HTTPResponse], content: str) -> HTTPResponse:
        """
        Encode content and write it as the response body

        Keeps an existing Content-Type (text/html otherwise), encodes with
        the response charset (utf-8 otherwise) and sets Content-Length to
        the encoded byte length. Called once per request, only after a
        successful render.

        An unknown charset is replaced by utf-8 in the Content-Type. HTML and
        XML bodies write characters the charset lacks as character
        references; other bodies switch to utf-8.

        Args:
            response: Response to complete (a new HTTPResponse when None)
            content: Rendered view

        Returns:
            The completed response
        """
        from sanic_render.defaults import DEFAULT_CHARSET, DEFAULT_CONTENT_TYPE

        if response is None:
            response = HTTPResponse()

        content_type = (
            response.headers.get('Content-Type')
            or response.content_type
            or DEFAULT_CONTENT_TYPE
        )
        charset = ResponseHelper.charset_of(response, content_type)
        try:
            codecs.lookup(charset)
        except LookupError:
            charset = DEFAULT_CHARSET
            content_type = ResponseHelper.with_charset(content_type, charset)

        try:
            body = content.encode(charset)
        except UnicodeEncodeError:
            if ResponseHelper.is_markup(content_type):
                # Characters outside the charset become numeric references
                body = content.encode(charset, errors='xmlcharrefreplace')
            else:
                charset = DEFAULT_CHARSET
                content_type = ResponseHelper.with_charset(content_type, charset)
                body = content.encode(charset)

        response.content_type = content_type
        response.headers['Content-Type'] = content_type
        response.headers['Content-Length'] = str(len(body))
        response.body = body
        return response

    @staticmethod
    def charset_of(response: HTTPResponse, content_type: Optional[str] = None) -> str:
        """
        Charset a response body should be encoded with
        """
        from sanic_render.defaults import DEFAULT_CHARSET

        charset = getattr(response, 'charset', None)
        if charset:
            return charset

        if content_type:
            match = ResponseHelper.CHARSET_RE.search(content_type)
            if match:
                return match.group(1)

        return DEFAULT_CHARSET

    @staticmethod
    def with_charset(content_type: str, charset: str) -> str:
        """Replace (or add) the charset parameter of a Content-Type"""
        if ResponseHelper.CHARSET_PARAM_RE.search(content_type):
            return ResponseHelper.CHARSET_PARAM_RE.sub(f'charset={charset}', content_type, count=1)
        return f"{content_type}; charset={charset}"

    @staticmethod
    def is_markup(content_type: str) -> bool:
        mime = content_type.split(';')[0].strip().lower()
        return 'html' in mime or 'xml' in mime


def emit(response: Optional[HTTPResponse], content: str) -> HTTPResponse:
    """Shortcut for ResponseHelper.emit"""
    return ResponseHelper.emit(response, content)
