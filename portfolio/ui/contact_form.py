"""Contact form behaviour.

Nothing is sent anywhere by default: ``SimulatedSubmitter`` stands in for a
backend and always succeeds after a fixed delay. Swap in another object with
the same ``submit(payload, done)`` method to wire a real endpoint.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from portfolio.ui.state import PageContext

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
SUBMIT_DELAY_MS = 1500
MESSAGE_LIFETIME_MS = 5000
BUSY_LABEL = "Sending..."
SUCCESS_MESSAGE = "Thanks for your message! I'll get back to you soon."
FAILURE_MESSAGE = "Oops! Something went wrong. Please try again."


class ContactSubmissionError(Exception):
    """Raised (or passed to ``done``) when a submitter cannot deliver."""


@dataclass
class ContactPayload:
    name: str = ""
    email: str = ""
    message: str = ""

    @classmethod
    def from_form(cls, data: Dict[str, Optional[str]]) -> "ContactPayload":
        return cls(
            name=data.get("name") or "",
            email=data.get("email") or "",
            message=data.get("message") or "",
        )


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def validate_contact(payload: ContactPayload) -> List[str]:
    """Return every rule the payload breaks, in form order."""
    errors = []
    if len(payload.name.strip()) < 2:
        errors.append("Please enter a valid name")
    if not payload.email or not is_valid_email(payload.email):
        errors.append("Please enter a valid email address")
    if len(payload.message.strip()) < 10:
        errors.append("Please enter a message with at least 10 characters")
    return errors


class SimulatedSubmitter:
    def __init__(self, scheduler, delay_ms: int = SUBMIT_DELAY_MS):
        self.scheduler = scheduler
        self.delay_ms = delay_ms
        self.received: List[ContactPayload] = []

    def submit(self, payload: ContactPayload, done: Callable[[Optional[Exception]], None]) -> None:
        def deliver():
            logger.info("Form submitted: %s", payload)
            self.received.append(payload)
            done(None)

        self.scheduler.set_timeout(deliver, self.delay_ms)


class ContactForm:
    def __init__(self, ctx: PageContext, submitter=None):
        self.ctx = ctx
        self.form = ctx.document.get_element_by_id("contact-form")
        self.submitter = submitter or SimulatedSubmitter(ctx.scheduler)
        self.submitting = False
        self._message_timer = None
        self.init()

    def init(self):
        if self.form is not None:
            self.form.add_event_listener("submit", self._on_submit)

    def _on_submit(self, event):
        event.prevent_default()
        self.handle_submit()

    def handle_submit(self) -> bool:
        """Validate and hand the payload to the submitter. False if rejected."""
        if self.submitting:
            return False

        payload = ContactPayload.from_form(self.form.form_data())
        errors = validate_contact(payload)
        if errors:
            self.show_message(". ".join(errors), "error")
            return False

        button = self.form.query_selector('button[type="submit"]')
        original_label = button.text_content if button is not None else ""
        if button is not None:
            button.text_content = BUSY_LABEL
            button.disabled = True
        self.submitting = True

        def done(error: Optional[Exception] = None) -> None:
            self.submitting = False
            try:
                if error is None:
                    self.show_message(SUCCESS_MESSAGE, "success")
                    self.form.reset()
                else:
                    logger.warning("Contact submission failed: %s", error)
                    self.show_message(FAILURE_MESSAGE, "error")
            finally:
                if button is not None:
                    button.text_content = original_label
                    button.disabled = False

        try:
            self.submitter.submit(payload, done)
        except ContactSubmissionError as e:
            done(e)
        except Exception as e:
            logger.exception("Submitter raised unexpectedly")
            done(e)
        return True

    def show_message(self, text: str, kind: str):
        existing = self.ctx.document.query_selector(".form-message")
        if existing is not None:
            existing.remove()
        self.ctx.scheduler.clear_timeout(self._message_timer)

        message = self.ctx.document.create_element("div")
        message.set_attribute("class", f"form-message form-message-{kind}")
        message.text_content = text
        self.form.append_child(message)

        def expire():
            if message.parent is not None:
                message.remove()

        self._message_timer = self.ctx.scheduler.set_timeout(expire, MESSAGE_LIFETIME_MS)
        return message
