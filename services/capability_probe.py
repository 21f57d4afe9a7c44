"""
Capability Probe Module

This module reports which parts of the analysis stack are live: the chat
endpoint (checked with a fixed diagnostic prompt) and URL context extraction
(checked against a known reference image).
"""

from typing import TYPE_CHECKING

from config import image_catalog, settings
from data.models import CapabilityReport
from services import context_heuristics
from utils.exceptions import GatewayError
from utils.logger import get_logger

if TYPE_CHECKING:
    from services.chat_gateway import ChatGateway

logger = get_logger(__name__)


class CapabilityProbe:
    """Builds a fresh CapabilityReport for a gateway."""

    def __init__(self, gateway: "ChatGateway"):
        self.gateway = gateway

    def probe(self) -> CapabilityReport:
        """
        Test the chat endpoint and context extraction.

        The diagnostic prompt bypasses the mock fallback, so any failure marks
        the chat endpoint as down and is recorded in ``error``. Never raises.

        Returns:
            CapabilityReport: The probe result
        """
        report = CapabilityReport(
            chat_endpoint=False,
            vision_endpoint=False,
            simulated_vision_capability=True,
            context_extraction_active=True,
            supported_features=list(image_catalog.SUPPORTED_FEATURES),
        )

        try:
            logger.info("Testing chat completions endpoint...")
            self.gateway.complete([{'role': 'user', 'content': settings.PROBE_MESSAGE}])
            report.chat_endpoint = True
            logger.info("Chat endpoint test successful")
        except GatewayError as e:
            logger.error(f"API capability test failed ({type(e).__name__}): {e}")
            if e.status_code:
                logger.error(f"Error status: {e.status_code}")
            report.error = str(e)
        except Exception as e:
            logger.error(f"Unexpected error during capability test: {e}", exc_info=True)
            report.error = str(e)

        # Context extraction does not depend on the endpoint
        report.context_extraction_active = self.check_context_extraction()
        return report

    @staticmethod
    def check_context_extraction() -> bool:
        try:
            context = context_heuristics.describe(settings.PROBE_REFERENCE_URL)
        except Exception as e:
            logger.error(f"Context extraction test failed: {e}")
            return False
        logger.info(f"Context extraction test successful. Length: {len(context)}")
        return len(context) >= settings.CONTEXT_EXTRACTION_MIN_LENGTH


def format_capability_report(report: CapabilityReport) -> str:
    """
    Render a capability report as the diagnostic text shown to users.

    Args:
        report: The probe result

    Returns:
        str: Multi-line diagnostic message
    """
    def status(ok: bool, down: str) -> str:
        return "Working" if ok else down

    lines = [
        "AI Analysis Capabilities:",
        "",
        f"- Text Chat API: {status(report.chat_endpoint, 'Not Working')}",
        f"- Vision API: {status(report.vision_endpoint, 'Not Available')}",
        f"- Context Extraction: {status(report.context_extraction_active, 'Not Working')}",
        "",
        "Supported Features:",
    ]
    lines.extend(f"- {feature}" for feature in report.supported_features)

    if report.error:
        lines.extend(["", f"Error: {report.error}"])

    return "\n".join(lines)
