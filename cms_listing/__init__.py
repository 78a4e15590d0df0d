"""
cms-listing-build: bind headless-CMS collections into a static, filterable listing page.
"""
