"""helpers for the quelpoke web app"""
