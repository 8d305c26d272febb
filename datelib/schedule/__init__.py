# Re-export schedule components
from .core import DatePeriod, WorkScheduleSpec, as_period
from .generator import generate_schedule, get_work_schedule, iter_work_days
