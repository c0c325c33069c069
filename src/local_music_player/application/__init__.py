"""
Application Layer

Contains application services and queries. This layer drives the domain
state machine and the audio output port.

Structure:
- queries/: Read-only views for the presentation layer
- services/: The playback controller and local file ingestion
- interfaces/: Port interfaces for infrastructure adapters
"""
