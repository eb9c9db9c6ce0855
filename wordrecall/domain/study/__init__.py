"""
Study domain: word lists, the list text format and recall sessions.
"""
