from .intent_classification_prompt import INTENT_CLASSIFICATION_PROMPT

__all__ = ["INTENT_CLASSIFICATION_PROMPT"]
