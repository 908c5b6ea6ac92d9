#!/usr/bin/env python3
"""
Main entry point untuk Room Temperature Feed
Home Assistant status -> entity cache -> room report over HTTP
"""

from core.monitor import RoomTemperatureMonitor

if __name__ == "__main__":
    monitor = RoomTemperatureMonitor()
    monitor.run()
