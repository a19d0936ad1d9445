from .correlation_id_context import CorrelationIdContext
from .event_schema_processor import event_schema_processor

__all__ = ["CorrelationIdContext", "event_schema_processor"]
