# Controllers package initialization
# One Flask blueprint per aggregate, plus the health endpoint

from .ai_controller import ai_bp
from .analytics_controller import analytics_bp
from .calendar_controller import calendar_bp
from .health_controller import health_bp
from .puppy_controller import puppy_bp
from .training_controller import training_bp
from .user_controller import user_bp

BLUEPRINTS = (
    health_bp,
    puppy_bp,
    calendar_bp,
    user_bp,
    training_bp,
    ai_bp,
    analytics_bp,
)

__all__ = ["BLUEPRINTS"]
