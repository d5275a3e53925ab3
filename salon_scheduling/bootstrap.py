"""Bootstrap - One-call setup of logging and policy for host applications."""

from salon_scheduling.config.policy import SchedulingPolicy
from salon_scheduling.config.settings import Settings, get_settings
from salon_scheduling.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def configure(settings: Settings | None = None) -> SchedulingPolicy:
    """Configure logging and report the active scheduling policy.

    Hosts call this once at startup. Components read the same settings
    through ``get_policy`` when their policy arguments are omitted.

    Args:
        settings: Settings to apply. Uses the cached settings if omitted.

    Returns:
        The policy built from those settings.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    policy = SchedulingPolicy.from_settings(settings)
    logger.info(
        "scheduling_core_configured",
        environment=settings.app_env,
        log_level=settings.log_level,
        edit_lead_time_days=policy.edit_lead_time.total_seconds() / 86400,
        week_start=policy.week_start,
        weekly_stats_window=policy.weekly_stats_window,
        default_custom_range_days=policy.default_custom_range_days,
    )
    return policy
