"""
Storefront AI package

This package organizes the dashboard into modules commonly used in production:
- settings: configuration and constants
- adapters: external integrations (EasyStore REST API, Gemini)
- domain: records, fixtures, prompts, output guardrails and metrics
- services: orchestration (data loading, AI content, session state)
"""

__all__ = [
    "settings",
    "adapters",
    "domain",
    "services",
]
