"""seo-meta-cli: LLM-generated SEO titles, descriptions, and focus keywords."""

__version__ = "0.1.0"
