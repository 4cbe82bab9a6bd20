# File: wordmap_app/modules/sentences/config.py

class SentencesDefaultConfig:
    # Vault that receives words typed directly into a sentence
    BUILDER_VAULT_NAME = 'Sentence Builder'
    NEW_WORD_CONFIDENCE = 1
    HIGHLIGHT_COLOR_MAX_LENGTH = 30
