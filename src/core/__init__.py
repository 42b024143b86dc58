"""Core domain package for reportlens.

Core contains report classification, permission checks, and display helpers
without any store or localization-specific code, keeping the logic portable.
"""
