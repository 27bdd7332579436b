"""
Framework Default Values
All hardcoded values should be defined here and read through ViewConfig
These defaults can be overridden in .env or when configuring the view engine
"""

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

DEFAULT_VIEW_ROOT = './views'
DEFAULT_VIEW_CACHE = True  # must stay enabled in production
DEFAULT_VIEW_LAYOUT = 'layout.html'
DEFAULT_VIEW_EXT = ''

# ============================================================================
# TEMPLATE DELIMITER DEFAULTS
# ============================================================================

DEFAULT_TEMPLATE_OPEN = '<%'
DEFAULT_TEMPLATE_CLOSE = '%>'

# ============================================================================
# RESPONSE DEFAULTS
# ============================================================================

DEFAULT_CONTENT_TYPE = 'text/html'
DEFAULT_CHARSET = 'utf-8'

# Reserved local holding the rendered view inside a layout
LAYOUT_BODY_KEY = 'body'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOGGER_NAME = 'sanic_render'
DEFAULT_LOG_FORMAT = 'text'
