"""MCP stdio adapter exposing the SHRED research and analysis tools."""
