import logging
import os
import time
from typing import Any

import streamlit as st

# --- OTel & Observability Imports ---
from opentelemetry import trace
from opentelemetry._logs import set_logger_provider
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

# --- Prometheus Import ---
from prometheus_client import start_http_server

# --- Application Imports ---
from trivia.config import GameConfig
from trivia.game.controller import TriviaController
from trivia.game.scheduler import ManualScheduler
from trivia.quiz.adapters.dataset_loader import DatasetLoader
from trivia.quiz.domain.models import Category
from trivia.quiz.presentation.renderer import StreamlitRenderer
from trivia.quiz.presentation.session_store import StreamlitGameStore
from trivia.quiz.presentation.views import components


# --- 1. Observability ---
def configure_observability() -> None:
    """
    Sends traces and logs over OTLP when the OTEL env vars are set,
    and exposes Prometheus metrics on port 8000.
    """
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    headers = os.getenv("OTEL_EXPORTER_OTLP_HEADERS")

    if endpoint and headers:
        resource = Resource.create({"service.name": "trivia-game"})

        trace_provider = TracerProvider(resource=resource)
        trace_provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, headers=headers))
        )
        trace.set_tracer_provider(trace_provider)

        logger_provider = LoggerProvider(resource=resource)
        logger_provider.add_log_record_processor(
            BatchLogRecordProcessor(OTLPLogExporter(endpoint=endpoint, headers=headers))
        )
        set_logger_provider(logger_provider)
        logging.getLogger().addHandler(
            LoggingHandler(level=logging.INFO, logger_provider=logger_provider)
        )
    else:
        logging.getLogger(__name__).warning(
            "OTEL env vars not set. Telemetry stays local."
        )

    try:
        start_http_server(8000)
    except OSError:
        # Port already bound by a previous Streamlit rerun
        logging.getLogger(__name__).info("Prometheus server already running")


if "observability_configured" not in st.session_state:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    configure_observability()
    st.session_state.observability_configured = True


# --- 2. Composition Root ---
@st.cache_resource
def load_categories() -> list[Category]:
    # Fetched once per server process; falls back to the embedded set
    return DatasetLoader(GameConfig.DATASET_SOURCE).load()


def build_controller() -> TriviaController:
    return TriviaController(
        load_categories(),
        mode=GameConfig.SELECTION_MODE,
        scheduler=ManualScheduler(),
    )


def main() -> None:
    st.set_page_config(page_title=GameConfig.APP_TITLE, layout="centered")
    components.apply_styles()

    controller = StreamlitGameStore().load_or_create(build_controller)
    renderer = StreamlitRenderer()

    def on_action(action: str, payload: Any) -> None:
        controller.handle_action(action, payload)
        st.rerun()

    renderer.render(controller.get_ui_model(), on_action)

    # Answer revealed: hold the reveal on screen, then fire the deferred advance
    scheduler = controller.scheduler
    if isinstance(scheduler, ManualScheduler) and scheduler.next_delay is not None:
        time.sleep(scheduler.next_delay)
        scheduler.run_pending()
        st.rerun()


if __name__ == "__main__":
    main()
