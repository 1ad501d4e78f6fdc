"""
Service layer abstraction.

Record sources supply salary records, the aggregation module turns
them into report views and the report service ties the two together
for the API handlers.  The insights service is independent of all of
them and only talks to the external question‑answering endpoint.
"""
