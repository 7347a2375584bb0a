"""CLI entrypoint: Typer app definition and command registration"""

import typer

from sitecontent.cli.commands import faq_cmd, main_callback, post_cmd, posts_cmd, robots_cmd, sitemap_cmd


app = typer.Typer(name="sitecontent", no_args_is_help=True, help="Markdown/MDX site content queries")

app.callback()(main_callback)
app.command(name="posts")(posts_cmd)
app.command(name="post")(post_cmd)
app.command(name="faq")(faq_cmd)
app.command(name="sitemap")(sitemap_cmd)
app.command(name="robots")(robots_cmd)
