# db-seo — Core Services
# Shared value resolution and markup helpers used by the resolver components
