from .routes import WebRoutes, COLLECT_ENDPOINT

__all__ = ['WebRoutes', 'COLLECT_ENDPOINT']
