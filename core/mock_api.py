"""
Canned stand-ins for the research backend.

Both calls block for a fixed latency and always succeed. The summary is
independent of the document text.
"""

import logging
import time

from core.models import SearchResult, Source, SummaryResult

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LATENCY = 1.5
DEFAULT_SUMMARY_LATENCY = 2.0

ANSWER_TEMPLATE = (
    "Based on current market analysis, {topic} involves several key considerations. "
    "Generally speaking, diversification remains crucial for long-term investment success. "
    "Market volatility in 2024 has been influenced by geopolitical tensions, inflation "
    "concerns, and technological disruptions.\n\n"
    "For investment strategies, consider your risk tolerance, time horizon, and financial "
    "goals. Historical data suggests that a balanced portfolio with exposure to both growth "
    "and value stocks, along with international diversification, tends to perform well over "
    "extended periods.\n\n"
    "It's important to conduct thorough research and consider consulting with a financial "
    "advisor for personalized investment advice."
)

SOURCES = (
    Source(
        title="Investment Fundamentals Guide 2024",
        url="https://example.com/investment-guide",
        excerpt=(
            "Comprehensive analysis of current market conditions and investment "
            "strategies for retail investors."
        ),
    ),
    Source(
        title="Market Volatility and Portfolio Management",
        url="https://example.com/portfolio-management",
        excerpt=(
            "Research on how market volatility affects different asset classes "
            "and risk management techniques."
        ),
    ),
    Source(
        title="Diversification Strategies for Modern Investors",
        url="https://example.com/diversification",
        excerpt=(
            "Academic research on optimal portfolio diversification across sectors "
            "and geographic regions."
        ),
    ),
)

SUMMARY = SummaryResult(
    bullet_points=(
        "Company shows strong revenue growth of 15% year-over-year with expanding "
        "market share in the technology sector",
        "Debt-to-equity ratio has improved from 0.8 to 0.6, indicating better financial "
        "management and reduced leverage risk",
        "Management guidance suggests continued investment in R&D and expansion into "
        "emerging markets over the next 2-3 years",
        "Current P/E ratio of 22 is slightly above industry average but justified by "
        "above-average growth projections",
        "Recent regulatory changes may impact operating margins in the short term but "
        "create long-term competitive advantages",
    ),
    verdict=(
        "Overall positive outlook with moderate risk - suitable for growth-oriented "
        "portfolios with 3+ year investment horizon"
    ),
)


def _wait(latency: float):
    if latency > 0:
        time.sleep(latency)


def mock_search(query: str, latency: float = DEFAULT_SEARCH_LATENCY) -> SearchResult:
    """Pretend to research `query`; the answer echoes it lowercased."""
    logger.info("Mock search started for %r (latency %.2fs)", query, latency)
    _wait(latency)
    return SearchResult(
        answer=ANSWER_TEMPLATE.format(topic=query.lower()),
        sources=SOURCES,
    )


def mock_summarize(text: str, latency: float = DEFAULT_SUMMARY_LATENCY) -> SummaryResult:
    logger.info("Mock summary started for %d chars (latency %.2fs)", len(text), latency)
    _wait(latency)
    return SUMMARY
