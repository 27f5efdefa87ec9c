"""
shred-check core package.

Modules
───────
models      — Pydantic data models (SearchResult, AnalysisResult, …) and enums
errors      — error taxonomy (ValidationError, ConfigurationError, …)
catalog     — fixed search queries per focus
search      — Google Custom Search client + result formatting
researcher  — requirements research blob built from several queries
prompts     — analysis prompt templates
inference   — Claude client for the eligibility judgment
analyzer    — research → prompt → inference pipeline
"""
