"""Qt widgets for the planner pages"""
