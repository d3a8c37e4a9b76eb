from seo_meta_cli.main import app

app()
