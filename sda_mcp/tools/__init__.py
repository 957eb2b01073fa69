"""Tool dispatch and request translation.

Modules are imported directly (``sda_mcp.tools.dispatcher`` etc.); this package
does not re-export them because ``archive_api.client`` depends on
``tools.request_builder``.
"""
