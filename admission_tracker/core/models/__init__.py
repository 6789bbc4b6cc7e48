from admission_tracker.core.models.admission import Admission

__all__ = [
    "Admission",
]
