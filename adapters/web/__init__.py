from adapters.web.app import create_web_app

__all__ = ["create_web_app"]
