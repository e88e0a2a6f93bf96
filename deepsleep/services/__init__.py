from deepsleep.services.aggregation import (
    DailyAggregate,
    totals_by_day,
    averages_by_day,
    chart_series,
    record_duration_hours,
)
from deepsleep.services.records import (
    RecordStoreError,
    list_records,
    get_record,
    create_record,
    update_record,
    delete_record,
)
from deepsleep.services.timestamps import (
    parse_timestamp,
    normalize_timestamp,
    format_duration,
)
from deepsleep.services.validators import (
    ValidationResult,
    validate_sleep_interval,
    validate_sleep_record,
)

__all__ = [
    'DailyAggregate',
    'totals_by_day',
    'averages_by_day',
    'chart_series',
    'record_duration_hours',
    'RecordStoreError',
    'list_records',
    'get_record',
    'create_record',
    'update_record',
    'delete_record',
    'parse_timestamp',
    'normalize_timestamp',
    'format_duration',
    'ValidationResult',
    'validate_sleep_interval',
    'validate_sleep_record',
]
