import threading
import logging

logger = logging.getLogger(__name__)

class BackgroundTask:
    """Base class untuk background tasks"""
    
    def __init__(self, interval, name="BackgroundTask"):
        self.interval = interval
        self.name = name
        self.thread = None
        self.is_running = False
        self._stop_event = threading.Event()
        
    def task(self):
        """Method yang harus di-override oleh subclass"""
        raise NotImplementedError
        
    def run(self):
        """Main run loop for the background task"""
        self.is_running = True
        while self.is_running:
            try:
                self.task()
            except Exception as e:
                logger.error(f"Error in {self.name}: {e}")
            # Wait returns early when stop() is called
            if self._stop_event.wait(self.interval):
                break
        self.is_running = False
                
    def start(self):
        """Start the background task in a separate thread"""
        self._stop_event.clear()
        self.thread = threading.Thread(target=self.run, daemon=True, name=self.name)
        self.thread.start()
        
    def stop(self, timeout=5):
        """Stop the background task"""
        self.is_running = False
        self._stop_event.set()
        if self.thread: 
            self.thread.join(timeout=timeout)
