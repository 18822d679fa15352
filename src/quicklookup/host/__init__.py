"""Desktop host link: the layer bridge and the event sources it can listen to.

- **LayerBridge / BridgeConfig**: relay from host layer events to a callback
- **HostTransport**: protocol every host transport implements
- **SocketHostTransport**: JSON-lines over a local TCP connection
- **PreviewEventSource**: in-memory source for running without a host
- **HostSimulator**: development host that broadcasts layer changes
"""

from .bridge import BridgeConfig, LayerBridge, LayerCallback
from .preview import PreviewEventSource
from .simulator import HostSimulator
from .socket_transport import SocketHostTransport
from .transport import HostEventHandler, HostMessage, HostTransport, LayerPayload, Unlisten

__all__ = [
    "BridgeConfig",
    "HostEventHandler",
    "HostMessage",
    "HostSimulator",
    "HostTransport",
    "LayerBridge",
    "LayerCallback",
    "LayerPayload",
    "PreviewEventSource",
    "SocketHostTransport",
    "Unlisten",
]
