from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Literal

MessageRole = Literal["system", "user", "assistant"]


@dataclass
class ChatMessage:
    role: MessageRole
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class GatewayOptions:
    """Routing options for the caching gateway in front of the model."""
    id: str
    skip_cache: bool = False
    cache_ttl: int = 3600000


@dataclass
class ModelRequest:
    messages: List[ChatMessage]
    temperature: float = 0.7
    max_tokens: int = 2048
    gateway: Optional[GatewayOptions] = None
    timeout_s: Optional[float] = None   # None = no client-side timeout

    def inputs(self) -> Dict[str, Any]:
        """Model inputs as sent on the wire."""
        return {
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


@dataclass
class ModelResponse:
    response: Optional[str] = None     # None when the model produced nothing
    metadata: Dict[str, Any] = field(default_factory=dict)
