"""
Adapters — Thin wrappers around the remote APIs.

- feishu: Feishu / Lark open platform (document fetchers' capability surface)
- weather: National Weather Service
- services: one-time client construction
"""
