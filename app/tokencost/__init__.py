"""Monthly token and cost estimator for hosted LLM APIs."""

__version__ = "0.1.0"
