"""Client for OpenAI-compatible and Azure OpenAI HTTP APIs: chat, completions, edits,
embeddings, engines, files and audio, with a small command line."""

__version__ = "0.1.0"