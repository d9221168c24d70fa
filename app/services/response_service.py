"""
ResponseService: Builds the fulfillment payloads returned to Dialogflow.
All builders are pure; the router picks exactly one per request.
"""

from typing import List, Sequence

from app.models.dialogflow_models import ChipOption

CHIP_IMAGES = {
    "support": "https://www.svgrepo.com/show/485554/customer-support.svg",
}

CUSTOMER_SUPPORT_LABEL = "Customer Support"

WELCOME_MESSAGES = (
    "Welcome to Our Virtual Assistant. How can I help you today?",
    "Please select a category below to continue:",
)

GENERIC_ERROR_MESSAGE = "Something went wrong while processing your request. Please try again."


def build_text_block(text: str) -> dict:
    return {"text": {"text": [text]}}


def build_text_messages(blocks: List[dict]) -> dict:
    return {"fulfillmentMessages": blocks}


def build_plain_text_response(text: str) -> dict:
    return {"fulfillmentText": text}


def build_chips_payload(options: Sequence[ChipOption]) -> dict:
    """Wraps chip options in the richContent envelope Dialogflow Messenger renders."""
    return {
        "payload": {
            "richContent": [
                [{
                    "type": "chips",
                    "options": [option.to_dialogflow() for option in options],
                }]
            ]
        }
    }


def build_welcome_response() -> dict:
    """Greeting, category prompt and a single Customer Support chip."""
    blocks = [build_text_block(message) for message in WELCOME_MESSAGES]
    blocks.append(build_chips_payload([
        ChipOption(text=CUSTOMER_SUPPORT_LABEL, image_url=CHIP_IMAGES["support"]),
    ]))
    return build_text_messages(blocks)


def build_missing_fields_response(missing: Sequence[str]) -> dict:
    """Asks for the missing fields, e.g. 'I still need your email and message.'"""
    text = (
        f"I still need your {' and '.join(missing)}. "
        "Please provide the remaining detail(s) so I can log your request."
    )
    return build_text_messages([build_text_block(text)])


def build_confirmation_response(user_name: str, user_email: str) -> dict:
    text = (
        f"Thanks {user_name}! I have logged your request and our team "
        f"will reach out at {user_email} very soon."
    )
    return build_text_messages([build_text_block(text)])
