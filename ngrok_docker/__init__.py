"""
ngrok-docker - run ngrok in a container and print its public URL
"""
__version__ = "1.0.0"
