from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChipOption(BaseModel):
    """
    Quick-reply chip rendered by Dialogflow Messenger.
    """
    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Label shown on the chip and sent back as queryText when tapped.")
    image_url: Optional[str] = Field(default=None, description="Icon displayed next to the label.")

    def to_dialogflow(self) -> dict:
        """Serializes the chip to the richContent option shape."""
        option = {"text": self.text}
        if self.image_url:
            option["image"] = {"src": {"rawUrl": self.image_url}}
        return option


class ConversationRecord(BaseModel):
    """
    One completed Customer Support request, stored as a single row.
    Columns match the fields one to one.
    """
    model_config = ConfigDict(frozen=True)

    session_id: Optional[str] = Field(default=None, description="Dialogflow session path or response id.")
    intent_name: Optional[str] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    user_message: Optional[str] = None
    channel: Optional[str] = Field(default=None, description="originalDetectIntentRequest.source, e.g. 'DIALOGFLOW_CONSOLE'.")

    def sanitized(self) -> dict:
        """Row ready for insert: every empty value becomes an explicit None."""
        return {key: value or None for key, value in self.model_dump().items()}
