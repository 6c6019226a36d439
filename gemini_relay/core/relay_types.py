"""Reply and error contracts for `gemini_relay.core.engine`.

Architectural role:
    Defines the transport-neutral reply returned by the relay handler and the two
    error kinds it distinguishes. The HTTP layer renders `RelayReply` as
    `{"response": ...}` with `status_code`.
"""

from dataclasses import dataclass

NO_MESSAGE_TEXT = "No message provided."
GENERIC_FAILURE_TEXT = "Something went wrong. Check API key or network."


class ClientInputError(Exception):
    """Caller omitted the message or sent an empty one."""

    status_code = 400
    public_message = NO_MESSAGE_TEXT


class UpstreamOrInternalError(Exception):
    """Calling or parsing the external API failed.

    The exception text is for server-side logs only; callers receive
    `public_message`.
    """

    status_code = 500
    public_message = GENERIC_FAILURE_TEXT


@dataclass(frozen=True)
class RelayReply:
    """Final relay outcome.

    Attributes:
        status_code: HTTP status to send.
        response: Text placed in the `response` field of the JSON body.
    """

    status_code: int
    response: str

    @classmethod
    def from_error(cls, err: ClientInputError | UpstreamOrInternalError) -> "RelayReply":
        return cls(status_code=err.status_code, response=err.public_message)
