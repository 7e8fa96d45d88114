"""Domain layer — direction model, robot state machine, and command parser.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
