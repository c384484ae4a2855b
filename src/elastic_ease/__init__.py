from .easing import (
    EasingFunction, EASING_FUNCTIONS, ease_in_out_elastic, get_easing, normalized,
)
from .sampling import Sample, sample_curve, midpoint_gap
from .options import DEFAULT_OPTIONS, OPTIONS_FILE, load_options, save_options

__version__ = "0.1.0"

__all__ = [
    'EasingFunction', 'EASING_FUNCTIONS', 'ease_in_out_elastic', 'get_easing', 'normalized',
    'Sample', 'sample_curve', 'midpoint_gap',
    'DEFAULT_OPTIONS', 'OPTIONS_FILE', 'load_options', 'save_options',
]
