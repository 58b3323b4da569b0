"""DX7Dump command line interface."""
