"""
Loyalty Exchange Service Django project.
"""
