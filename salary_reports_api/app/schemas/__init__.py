"""
Pydantic schema definitions for API payloads.

``report`` holds the salary record and the derived report views;
``insight`` holds the request and response bodies of the insights
proxy.
"""
