"""Board controller and its mixins (history, events, configuration)"""
