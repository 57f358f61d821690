class Constants:
    API_SIGNED_EXPIRATION_SECONDS = 1200  # 20 minutes
    EVIDENCE_BASE_MINUTES = 9 * 60 + 9  # E1 is displayed at 09:10
    EVIDENCE_ID_PREFIX = "E"
    GOOGLE_API_URL = "https://generativelanguage.googleapis.com/v1beta"
    GOOGLE_CHAT_TEXT = "models/gemini-2.0-flash"
    IMAGE_STATEMENT_PREFIX = "【图片采集】"
    LANGUAGE_CHINESE = "zh"
    LANGUAGE_ENGLISH = "en"
    LLM_TIMEOUT_DEFAULT = 60  # seconds
    LLM_TIMEOUT_MAX = 300
    LLM_TIMEOUT_MIN = 5
    MINUTES_PER_DAY = 24 * 60
    OPENAI_COMPATIBLE_API_URL = "https://api.deepseek.com/v1/chat/completions"
    OPENAI_COMPATIBLE_CHAT_TEXT = "deepseek-chat"
    SECRET_API_SIGNING_KEY = "APISigningKey"
    SECRET_LLM_TIMEOUT = "TimeoutTextLLM"
    SECRET_TEXT_LLM_KEY = "KeyTextLLM"
    SECRET_TEXT_LLM_MODEL = "ModelTextLLM"
    SECRET_TEXT_LLM_URL = "UrlTextLLM"
    SECRET_TEXT_LLM_VENDOR = "VendorTextLLM"
    VENDOR_GOOGLE = "Google"
    VENDOR_OPENAI = "OpenAI"
