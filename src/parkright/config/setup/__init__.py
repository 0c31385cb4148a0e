# 🧩 parkright/config/setup/__init__.py
"""🧩 Збирання залежностей з конфігурації."""
