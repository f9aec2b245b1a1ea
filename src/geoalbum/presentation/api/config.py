"""API configuration adapter.

Bridges the centralized geoalbum_config settings with the API layer.
"""

from fastapi import Request

from geoalbum_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings
