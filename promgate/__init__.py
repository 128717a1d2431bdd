"""
promgate - startup gate for a Prometheus-compatible metrics server

Resolves the operating mode (server or agent) from command-line flags,
rejects flag combinations the mode does not allow, bounds-checks storage
parameters, validates remote-write protobuf message negotiation, and only
then lets the process start serving.

Every startup attempt ends in exactly one verdict:
- Accepted: the process serves and stays up
- Rejected: one diagnostic line on stderr, exit code 1
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
