class FormField:
    IMAGE = "image"
    TARGET_LANG = "targetLang"


class Defaults:
    TARGET_LANGUAGE = "en"
    MIME_TYPE = "image/jpeg"


class ErrorMessage:
    CONFIGURATION = "Server configuration error (no API key)"
    NO_IMAGE = "No image provided"
    UPSTREAM = "Gemini API error"
    UPSTREAM_EMPTY = "No response from Gemini"
    UNEXPECTED_FORMAT = "Unexpected Gemini response format"
    MALFORMED_PAYLOAD = "Failed to parse Gemini JSON response"
    UNEXPECTED = "Unexpected server error"
