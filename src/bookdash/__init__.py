# ABOUTME: Bookdash - a terminal dashboard over the Open Library catalog.
# ABOUTME: Search, enrich with author metadata, page, sort, edit, and export to CSV.
