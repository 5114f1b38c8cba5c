"""
Prefect flows for the polling pipeline.

Flows:
- poll: Download the citypage feed, normalize it, save the records

Usage (local):
    python -m citypage_weather.flows.poll

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'poll-citypage/default'
"""
