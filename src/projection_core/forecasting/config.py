"""Policy constants for the forecasting engine."""

# Minimum number of monthly points needed to produce a forecast
MIN_HISTORY_POINTS = 3

# Bounds accepted for ForecastConfig
MAX_HISTORICAL_MONTHS = 60
MAX_FORECAST_MONTHS = 36

# Slope band (value per step) inside which a trend is "stable"
TREND_THRESHOLD = 0.05

# Months per seasonal cycle
SEASONAL_PERIOD = 12

# Trailing window for the weighted moving average method
WEIGHTED_AVERAGE_PERIODS = 3

# Fraction of slope applied per step when nudging averages with the trend
TREND_NUDGE = 0.1

# Confidence band widening per forecast step
CONFIDENCE_WIDENING = 0.1

# Confidence score lost per forecast step, and label thresholds
CONFIDENCE_DECAY = 5
HIGH_CONFIDENCE_SCORE = 80
MEDIUM_CONFIDENCE_SCORE = 50

# Decimal places used when a result is assembled
MONEY_DECIMALS = 2
SLOPE_DECIMALS = 3
