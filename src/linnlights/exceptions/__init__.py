"""
Custom exception hierarchy for linnlights.

## Exception Hierarchy

```
LinnLightsError (base)
├── DeviceError
│   ├── DeviceAccessUnavailableError
│   ├── DeviceNotFoundError
│   └── SendFailureError
├── InvalidArgumentError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions carry `user_message`, `technical_message`,
`recoverable`, `recovery_hint` and a class-level notification `severity`.

Discovery failures (`DeviceAccessUnavailableError`, `DeviceNotFoundError`)
are reported through a notifier and never raised out of the locator.
`SendFailureError` is returned inside a `SendResult`. `InvalidArgumentError`
is raised before anything reaches the hardware.
"""

from .base import LinnLightsError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import (
    DeviceAccessUnavailableError,
    DeviceError,
    DeviceNotFoundError,
    SendFailureError,
)
from .handlers import (
    format_error_for_display,
    wrap_midi_error,
    wrap_pydantic_error,
)
from .validation import InvalidArgumentError

__all__ = [
    # Base
    "LinnLightsError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Device
    "DeviceAccessUnavailableError",
    "DeviceError",
    "DeviceNotFoundError",
    "SendFailureError",
    # Validation
    "InvalidArgumentError",
    # Handlers
    "format_error_for_display",
    "wrap_midi_error",
    "wrap_pydantic_error",
]
