"""
Prefect flows for the weather pipeline.

Flows:
- current: OpenWeatherMap current conditions + 24 h forecast → tab 1
- statistics: Visual Crossing timeline → sampled series → tabs 2 and 3
- build: runs both and writes the tabbed page plus chart files to site/

Usage (local):
    python -m weather_viewer.flows.build Moscow

Usage (CLI):
    weather-viewer build --city Moscow --start 2024-06-01 --end 2024-06-07 --freq 3h
"""
