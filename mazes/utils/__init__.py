"""Random source, grid construction helpers and array views."""
