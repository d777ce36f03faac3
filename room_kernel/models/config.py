"""Action Engine configuration."""

from pydantic import BaseModel


class EngineConfig(BaseModel):
    """Configuration for the Action Engine."""

    record_history: bool = True             # Push DidTo / WasBy facts after each action
    serialize_access: bool = True           # Hold the room lock for the whole transaction
