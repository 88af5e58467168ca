"""OpenWeather API constants.

API docs: https://openweathermap.org/current
"""

OPENWEATHER_API = "https://api.openweathermap.org"
CURRENT_PATH = "/data/2.5/weather"

UNITS = "metric"
LANG = "en"

# Vendor reports wind in m/s with metric units
MS_TO_KPH = 3.6
