#!/usr/bin/env python3
"""
ngrok-docker - Entry Point
Run with: python main.py [port]
Or, once installed: ngrok-docker [port]
"""
from ngrok_docker.cli import run

if __name__ == "__main__":
    run()
