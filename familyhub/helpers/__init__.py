"""Helper modules for FamilyHub.

Contains helpers shared by the engines:
- config_helpers: Layout configuration schema and the frozen LayoutConfig
"""
