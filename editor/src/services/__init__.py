"""Services: configuration analysis and text rendering"""
