from flask import jsonify
import logging

from core.converter import convert_entities

logger = logging.getLogger(__name__)

COLLECT_ENDPOINT = "/measure/v1/collect"

class WebRoutes:
    """Class untuk mengelola semua web routes"""
    
    def __init__(self, config, cache, refresh_task=None):
        self.config = config
        self.cache = cache
        self.refresh_task = refresh_task
        
    def register_routes(self, app):
        """Register semua routes ke Flask app"""
        
        # === Data API Routes ===
        @app.route(COLLECT_ENDPOINT, methods=['GET'])
        def collect():
            try:
                entities = self.cache.snapshot()
                report = convert_entities(entities)
                return jsonify(report.to_dict())
            except Exception as e:
                logger.exception(f"Error building room report: {e}")
                return jsonify({"error": str(e)}), 500
        
        # === Utility Routes ===
        @app.route("/keepalive")
        def keepalive():
            return {"status": "alive", "timestamp": self.config.format_time()}
        
        @app.route("/health")
        def health():
            refresh_state = None
            last_error = None
            if self.refresh_task is not None:
                refresh_state = self.refresh_task.state.value
                last_error = self.refresh_task.last_error
            return {
                "status": "healthy",
                "entities": len(self.cache),
                "refresh_state": refresh_state,
                "last_error": last_error
            }
