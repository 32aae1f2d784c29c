"""toolcreds: credential requirements and cleanup for tool users.

Computes which credentials the tools of an Agent or Workflow need, whether
those credentials exist, and removes stored credentials nothing references
anymore.
"""

__version__ = "0.1.0"
