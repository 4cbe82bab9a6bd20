# File: wordmap_app/modules/auth/config.py

class AuthDefaultConfig:
    MIN_PASSWORD_LENGTH = 6
    RESET_CODE_LENGTH = 6
    # Overridden by the app config key RESET_CODE_TTL_MINUTES
    RESET_CODE_TTL_MINUTES = 15
