"""Constants and configuration values for Sentilyzer."""

# Analysis Constants
class AnalysisConstants:
    """Constants related to batch classification."""
    
    # Batch Limits
    MAX_BATCH_ITEMS = 20  # lines kept from an uploaded file
    MAX_REQUEST_TEXT_LENGTH = 500  # chars per item sent to the model
    
    # Keyword Limits (described to the model, not enforced on the response)
    MIN_KEYWORDS = 1
    MAX_KEYWORDS = 3
    
    # Model Call
    LLM_TEMPERATURE = 0.0  # deterministic labels
    LLM_MAX_TOKENS = 2000  # enough for 20 items with keywords

# Prompt Constants
class PromptConstants:
    """Constants for LLM prompts and templates."""
    
    SYSTEM_INSTRUCTION = "You are an expert NLP Sentiment Analysis engine. Be precise and objective."
    SCHEMA_NAME = "sentiment_batch"

# Error Handling Constants
class ErrorConstants:
    """Constants for error handling."""
    
    GENERIC_FAILURE_MESSAGE = "Failed to analyze text. Please check your API key and try again."

# Export Constants
class ExportConstants:
    """Constants for CSV/JSON export."""
    
    CSV_HEADERS = ["Original Text", "Sentiment", "Confidence", "Keywords"]
    FILENAME_PREFIX = "sentiment_analysis"
    CSV_MIME = "text/csv;charset=utf-8"
    JSON_MIME = "application/json"

# File and Path Constants
class FileConstants:
    """Constants for file operations."""
    
    ACCEPTED_UPLOAD_TYPES = ["txt", "csv", "json"]
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# UI Constants
class UIConstants:
    """Constants for the Streamlit UI."""
    
    SENTIMENT_COLORS = {
        "Positive": "#10b981",  # emerald-500
        "Neutral": "#94a3b8",   # slate-400
        "Negative": "#f43f5e",  # rose-500
    }
    SENTIMENT_ICONS = {
        "Positive": "✅",
        "Negative": "⚠️",
        "Neutral": "➖",
    }
    TEXT_PLACEHOLDER = "Enter text to analyze here (e.g. 'I absolutely love this product, it changed my life!')..."
