import logging
import sys
import time
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

# --- Prometheus Imports ---
from prometheus_client import REGISTRY, Counter, Histogram

# --- Context for Correlation IDs ---
correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="system")

P = ParamSpec("P")
R = TypeVar("R")
M = TypeVar("M")


def _get_or_create(metric_name: str, factory: Callable[[], M]) -> M:
    """
    Streamlit re-imports modules on every rerun, so a metric may already
    be registered. Reuse the registered collector in that case.
    """
    try:
        return factory()
    except ValueError:
        return cast(M, REGISTRY._names_to_collectors[metric_name])


# --- Metric Definitions ---
METHOD_DURATION: Histogram = _get_or_create(
    "trivia_method_duration_seconds",
    lambda: Histogram(
        "trivia_method_duration_seconds",
        "Time spent in controller/domain method",
        ["component", "method"],
    ),
)

ANSWERS_TOTAL: Counter = _get_or_create(
    "trivia_answers_total",
    lambda: Counter("trivia_answers_total", "Submitted answers", ["correct"]),
)

DATASET_FALLBACKS_TOTAL: Counter = _get_or_create(
    "trivia_dataset_fallbacks_total",
    lambda: Counter(
        "trivia_dataset_fallbacks_total", "Dataset loads that used the fallback"
    ),
)

GAMES_FINISHED_TOTAL: Counter = _get_or_create(
    "trivia_games_finished_total",
    lambda: Counter("trivia_games_finished_total", "Games played to the end"),
)


def measure_time(metric_name: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator for timing instance methods.
    Observes the Prometheus histogram and logs through `self.telemetry`
    when the instance has one.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start = time.perf_counter()
            self_obj: Any = args[0] if args else None
            component = self_obj.__class__.__name__ if self_obj else "Unknown"
            telemetry = getattr(self_obj, "telemetry", None)

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.perf_counter() - start
                METHOD_DURATION.labels(
                    component=component, method=func.__name__
                ).observe(duration)
                if telemetry:
                    telemetry.log_error(
                        f"Failed: {metric_name}",
                        e,
                        duration_ms=round(duration * 1000, 2),
                    )
                raise

            duration = time.perf_counter() - start
            METHOD_DURATION.labels(component=component, method=func.__name__).observe(
                duration
            )
            if telemetry:
                telemetry.log_debug(
                    f"⏱️ {metric_name}", duration_ms=round(duration * 1000, 2)
                )
            return result

        return wrapper

    return decorator


class Telemetry:
    """
    Facade for Logs and Metrics.
    Every message carries the current correlation id so one player action
    can be followed across components.
    """

    def __init__(self, component_name: str) -> None:
        self.component = component_name
        self.logger: logging.Logger
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Initializes the logger. Safe to call multiple times."""
        self.logger = logging.getLogger(f"trivia.{self.component}")

        # Console output when nothing upstream is configured
        if not self.logger.handlers and not logging.getLogger().handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def __getstate__(self) -> dict[str, Any]:
        """Pickling: Save everything EXCEPT the logger."""
        state = self.__dict__.copy()
        state.pop("logger", None)
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._setup_logger()

    @staticmethod
    def start_trace() -> str:
        c_id = str(uuid.uuid4())[:8]
        correlation_id_ctx.set(c_id)
        return c_id

    @staticmethod
    def get_trace_id() -> str:
        return correlation_id_ctx.get()

    def _format(self, event: str, kwargs: dict[str, Any]) -> str:
        if kwargs:
            return f"[{self.get_trace_id()}] {event} | {kwargs}"
        return f"[{self.get_trace_id()}] {event}"

    def log_debug(self, event: str, **kwargs: Any) -> None:
        self.logger.debug(self._format(event, kwargs))

    def log_info(self, event: str, **kwargs: Any) -> None:
        self.logger.info(self._format(event, kwargs))

    def log_warning(self, event: str, **kwargs: Any) -> None:
        self.logger.warning(self._format(event, kwargs))

    def log_error(self, event: str, error: Exception, **kwargs: Any) -> None:
        msg = f"[{self.get_trace_id()}] ❌ {event} | Error: {error} | {kwargs}"
        self.logger.error(msg, exc_info=error)
