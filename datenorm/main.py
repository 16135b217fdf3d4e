from datenorm.api.main import app

__all__ = ["app"]
