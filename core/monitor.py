import logging
from flask import Flask

from config.settings import RoomMonitorConfig
from core.entity_cache import EntityCache
from services.ha_client import HomeAssistantClient
from tasks.status_refresh_task import StatusRefreshTask
from web.routes import WebRoutes

logger = logging.getLogger(__name__)

class RoomTemperatureMonitor:
    """Main monitor class yang mengelola cache, refresh task dan web server"""
    
    def __init__(self, config=None):
        self.config = config or RoomMonitorConfig()
        
        # Initialize components
        self.cache = EntityCache(self.config.CACHE_TTL)
        self.client = HomeAssistantClient(
            self.config.ha.ha_status_url,
            self.config.ha.ha_auth_token,
            timeout=self.config.HA_REQUEST_TIMEOUT
        )
        self.refresh_task = StatusRefreshTask(self.config, self.client, self.cache)
        self.tasks = [self.refresh_task]
    
    def start_background_tasks(self):
        """Memulai semua background tasks"""
        for task in self.tasks:
            task.start()
        logger.info("All background tasks started")
    
    def stop_background_tasks(self):
        """Stop semua background tasks"""
        for task in self.tasks:
            task.stop()
        logger.info("All background tasks stopped")
    
    def create_flask_app(self):
        """Create dan configure Flask application"""
        app = Flask(__name__)
        
        web_routes = WebRoutes(self.config, self.cache, self.refresh_task)
        web_routes.register_routes(app)
        
        return app
    
    def run(self):
        """Run the complete monitoring system"""
        try:
            self.start_background_tasks()
            
            app = self.create_flask_app()
            ssl_context = None
            if self.config.use_tls:
                ssl_context = (self.config.TLS_CERT, self.config.TLS_KEY)
                logger.info("Serving with TLS")
            
            logger.info(f"Listening on port {self.config.PORT}")
            app.run(host="0.0.0.0", port=self.config.PORT, ssl_context=ssl_context, threaded=True)
                
        except KeyboardInterrupt:
            logger.info("Shutting down...")
        finally:
            self.stop_background_tasks()
            self.client.close()
