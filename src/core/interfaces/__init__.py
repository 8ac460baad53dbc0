"""Core interfaces/abstractions.

Why:
- Defines the capability contracts (Protocol) that concrete adapters
  implement: version control, package tool, hosting API, downloads.
- Inverts dependencies: the pipeline depends on abstractions and is tested
  against in-memory fakes.
"""
