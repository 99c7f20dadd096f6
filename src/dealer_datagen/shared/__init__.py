"""
Shared components for the dealer data generator.
"""
