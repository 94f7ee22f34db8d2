"""Forecast methods module.

Adding a forecast method
========================

1. Add a member to ``ForecastMethodName`` in ``forecasting/types.py``.

2. Subclass ``ForecastMethod`` and implement ``predict_step()``:
   ```python
   class MyMethod(ForecastMethod):
       name = ForecastMethodName.MY_METHOD

       def predict_step(self, values, trend, step):
           return ...
   ```
   Do not clamp inside predict_step(); ``forecast()`` clamps every step.

3. Register a factory in ``_FACTORIES`` below. The factory receives
   ``ForecastConfig.custom_assumptions`` so methods can read user inputs.

Existing implementations:
- LinearMethod: see models/linear.py
- ExponentialMethod, ManualGrowthMethod: see models/growth.py
- WeightedAverageMethod: see models/moving_average.py
- SeasonalMethod: see models/seasonal.py
"""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Union

from projection_core.exceptions import ConfigError
from projection_core.forecasting.models.base import ForecastMethod
from projection_core.forecasting.models.growth import ExponentialMethod, ManualGrowthMethod
from projection_core.forecasting.models.linear import LinearMethod
from projection_core.forecasting.models.moving_average import WeightedAverageMethod
from projection_core.forecasting.models.seasonal import SeasonalMethod
from projection_core.forecasting.types import ForecastMethodName

_FACTORIES: Dict[ForecastMethodName, Callable[[Mapping[str, float]], ForecastMethod]] = {
    ForecastMethodName.LINEAR: lambda _assumptions: LinearMethod(),
    ForecastMethodName.EXPONENTIAL: lambda _assumptions: ExponentialMethod(),
    ForecastMethodName.WEIGHTED_AVERAGE: lambda _assumptions: WeightedAverageMethod(),
    ForecastMethodName.SEASONAL: lambda _assumptions: SeasonalMethod(),
    ForecastMethodName.MANUAL: ManualGrowthMethod.from_assumptions,
}


def get_forecast_method(
    name: Union[ForecastMethodName, str],
    custom_assumptions: Optional[Mapping[str, float]] = None,
) -> ForecastMethod:
    """Build the forecast method registered under ``name``.

    Args:
        name: Method name, as enum member or its string value.
        custom_assumptions: User assumptions passed to the method factory.

    Returns:
        ForecastMethod instance.

    Raises:
        ConfigError: If no method is registered under ``name``.
    """
    try:
        key = ForecastMethodName(name)
    except ValueError:
        raise ConfigError(f"Unknown forecast method: {name!r}") from None
    return _FACTORIES[key](custom_assumptions or {})


__all__ = [
    "ExponentialMethod",
    "ForecastMethod",
    "LinearMethod",
    "ManualGrowthMethod",
    "SeasonalMethod",
    "WeightedAverageMethod",
    "get_forecast_method",
]
