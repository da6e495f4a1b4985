from pydantic import BaseModel, Field


class AnalyticsSettings(BaseModel):
    """
    Numeric knobs for the analytics engine.
    """
    forecasting_window: int = Field(default=7, ge=1, description="Window (days) for MA/WMA smoothing")
    ema_alpha: float = Field(default=0.3, gt=0, lt=1, description="EMA smoothing factor")
    anomaly_threshold: float = Field(default=2.0, gt=0, description="|z| above which a day is an anomaly")
    break_sensitivity: float = Field(default=1.5, gt=0, description="Mean shift, in sigmas, that marks a structural break")
    forecast_periods: int = Field(default=14, ge=1, description="Number of future days to forecast")
    max_lag: int = Field(default=7, ge=1, description="Highest autocorrelation lag")
    min_history: int = Field(default=3, ge=1, description="Days required before analytics are computed")
    min_forecast_history: int = Field(default=7, ge=1, description="Days required before forecasting")


class SystemSettings(BaseModel):
    """
    Global system configuration settings.
    """
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
    log_level: str = Field(default="INFO", description="Root logging level")
