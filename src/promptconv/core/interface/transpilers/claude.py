"""Claude transpiler — flattens a transcript into "Human:/Assistant:" turn markup.

Key differences from the canonical transcript:
- The prompt is a single string; every turn is introduced by a marker.
- Message names are not supported, so they are folded into the text.
- Example dialogue is carried on named system messages and rendered with the
  short "H:" / "A:" markers.
- Leading system messages can be lifted into a preamble placed ahead of the
  first marker.
"""

import logging
from collections.abc import Iterable

from promptconv.core.interface.models import (
    Message,
    MessageLike,
    Role,
    Transcript,
    to_messages,
)
from promptconv.utils.telemetry import (
    ATTR_MESSAGE_COUNT,
    ATTR_PROMPT_LENGTH,
    ATTR_PROVIDER,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

HUMAN_PREFIX = "\n\nHuman: "
ASSISTANT_PREFIX = "\n\nAssistant: "
EXAMPLE_HUMAN_PREFIX = "\n\nH: "
EXAMPLE_ASSISTANT_PREFIX = "\n\nA: "
SYSTEM_PREFIX = "\n\n"

EXAMPLE_USER_NAME = "example_user"
EXAMPLE_ASSISTANT_NAME = "example_assistant"


def fold_names(messages: Iterable[Message]) -> list[Message]:
    """Fold speaker names of non-system messages into their text.

    ``{"role": "user", "name": "Bob", "content": "hi"}`` becomes
    ``{"role": "user", "content": "Bob: hi"}``. Returns new messages; the
    inputs are left untouched.
    """
    folded: list[Message] = []
    for msg in messages:
        if msg.name and msg.kind is not Role.SYSTEM:
            msg = msg.with_text(f"{msg.name}: {msg.text}").model_copy(update={"name": None})
        folded.append(msg)
    return folded


def extract_system_preamble(messages: list[Message]) -> tuple[str, list[Message]]:
    """Split leading unnamed system messages off into a preamble.

    Only indices up to ``len - 2`` are scanned, so the last message is never
    part of the preamble. Qualifying messages are removed only when a
    boundary message (any other role, or a named system message) ends the
    run; otherwise they stay in the list and still contribute to the
    preamble.

    Returns ``(preamble, remaining_messages)``.
    """
    parts: list[str] = []
    for index, msg in enumerate(messages[:-1]):
        if msg.kind is Role.SYSTEM and not msg.name:
            parts.append(msg.text + "\n\n")
            continue
        return "".join(parts), messages[index:]
    return "".join(parts), list(messages)


def _turn_prefix(msg: Message) -> str:
    kind = msg.kind
    if kind is Role.ASSISTANT:
        return ASSISTANT_PREFIX
    if kind is Role.USER:
        return HUMAN_PREFIX
    if kind is Role.SYSTEM:
        if msg.name == EXAMPLE_ASSISTANT_NAME:
            return EXAMPLE_ASSISTANT_PREFIX
        if msg.name == EXAMPLE_USER_NAME:
            return EXAMPLE_HUMAN_PREFIX
        return SYSTEM_PREFIX
    logger.debug("Claude prompt: no turn marker for role %r", msg.role)
    return ""


def convert_claude_prompt(
    messages: Transcript | Iterable[MessageLike],
    add_human_prefix: bool,
    add_assistant_postfix: bool,
    with_system_prompt: bool,
) -> str:
    """Render *messages* as a Claude text-completion prompt.

    Args:
        messages: The transcript. Never mutated.
        add_human_prefix: Prepend a ``Human:`` marker to the rendered turns.
        add_assistant_postfix: Append an open ``Assistant:`` marker.
        with_system_prompt: Lift leading system messages into a preamble that
            precedes everything else, including the ``Human:`` prefix.
    """
    working = fold_names(to_messages(messages))

    preamble = ""
    if with_system_prompt:
        preamble, working = extract_system_preamble(working)

    prompt = "".join(_turn_prefix(msg) + msg.text for msg in working)

    if add_human_prefix:
        prompt = HUMAN_PREFIX + prompt

    if add_assistant_postfix:
        prompt = prompt + ASSISTANT_PREFIX

    return preamble + prompt


class ClaudeTranspiler:
    """Renders transcripts for Claude's text-completion endpoint."""

    provider = "claude"

    def __init__(
        self,
        *,
        add_human_prefix: bool = True,
        add_assistant_postfix: bool = True,
        with_system_prompt: bool = False,
    ) -> None:
        self.add_human_prefix = add_human_prefix
        self.add_assistant_postfix = add_assistant_postfix
        self.with_system_prompt = with_system_prompt

    def to_provider(self, messages: Transcript | Iterable[MessageLike]) -> str:
        """Convert *messages* to a single prompt string."""
        msgs = to_messages(messages)
        with _tracer.start_as_current_span("promptconv.convert") as span:
            span.set_attribute(ATTR_PROVIDER, self.provider)
            span.set_attribute(ATTR_MESSAGE_COUNT, len(msgs))
            prompt = convert_claude_prompt(
                msgs,
                self.add_human_prefix,
                self.add_assistant_postfix,
                self.with_system_prompt,
            )
            span.set_attribute(ATTR_PROMPT_LENGTH, len(prompt))
        return prompt
