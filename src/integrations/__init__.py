"""
Adapters for external providers used by the Lambda handler.
"""
