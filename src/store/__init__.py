"""Storage layer.

This package persists ordered record collections as property-list files
and composes the schedules and completed stores for the SDK.
"""
