"""
Update Flatpak applications and report the result to Telegram.
"""
