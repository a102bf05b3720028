"""
fluentrest CLI commands.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import dataclasses
import json
import xml.etree.ElementTree as ET
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from fluentrest.client import RestClient
from fluentrest.config import get_config
from fluentrest.errors import MalformedXmlError, RestError
from fluentrest.headers import basic_auth_header, bearer_auth_header, parse_headers
from fluentrest.logging_config import configure_logging
from fluentrest.response import RestResponse


def parse_params(param_strings: list[str]) -> dict[str, Any]:
    """Parse 'name=value' strings; a repeated name collects a list of values."""
    params: dict[str, Any] = {}
    for p in param_strings:
        if "=" not in p:
            continue
        name, value = p.split("=", 1)
        if name in params:
            existing = params[name]
            params[name] = existing + [value] if isinstance(existing, list) else [existing, value]
        else:
            params[name] = value
    return params


def format_json(data: Any, indent: int = 2) -> str:
    """Format JSON data for display."""
    return json.dumps(data, indent=indent, default=str)


def format_xml(element: ET.Element, indent: int = 2) -> str:
    """Format XML element for display."""
    ET.indent(element, space=" " * indent)
    return ET.tostring(element, encoding="unicode")


def print_body(console: Console, resp: RestResponse, raw: bool) -> None:
    media_type = resp.content_type
    subtype = media_type.subtype if media_type else ""

    if raw or not resp.content:
        console.print(resp.text, markup=False)
    elif subtype == "json" or subtype.endswith("+json"):
        try:
            formatted = format_json(resp.json())
        except ValueError:
            console.print(resp.text, markup=False)
            return
        console.print(Syntax(formatted, "json", theme="monokai", line_numbers=False))
    elif subtype == "xml" or subtype.endswith("+xml"):
        try:
            formatted = format_xml(resp.xml)
        except MalformedXmlError:
            console.print(resp.text, markup=False)
            return
        console.print(Syntax(formatted, "xml", theme="monokai", line_numbers=False))
    else:
        console.print(resp.text, markup=False)


@click.group()
@click.option("--debug", is_flag=True, help="Log request/response exchanges to stderr")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write the package log to this file")
@click.pass_context
def cli(ctx, debug: bool, log_file: str | None):
    """Fluent REST requests from the command line."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    if debug or log_file:
        configure_logging(debug=True, log_file=log_file, console=debug)


@cli.command("request")
@click.argument("url")
@click.option("-X", "--method", default="GET", help="HTTP method (GET, POST, PUT, DELETE)")
@click.option("-H", "--header", multiple=True, help="Headers in 'Name: Value' format")
@click.option("-p", "--param", multiple=True, help="Query params in 'name=value' format")
@click.option("-d", "--data", help="Request body data")
@click.option("-u", "--user", help="Basic auth in 'username:password' format")
@click.option("--bearer", help="Bearer token for Authorization header")
@click.option("--base-url", help="Base URL for relative paths")
@click.option("--accept", help="Accept header media type")
@click.option("--expect-status", type=int, help="Fail unless the response has this status")
@click.option("--expect-type", help="Fail unless the response has this content type")
@click.option("--compatible", is_flag=True, help="Allow wildcards with --expect-type")
@click.option("-t", "--timeout", type=float, help="Request timeout in seconds")
@click.option("-k", "--insecure", is_flag=True, help="Disable SSL verification")
@click.option("-v", "--verbose", is_flag=True, help="Show request and response headers")
@click.option("--raw", is_flag=True, help="Show raw response without formatting")
@click.pass_context
def request_cmd(ctx, url: str, method: str, header: tuple, param: tuple, data: str | None,
                user: str | None, bearer: str | None, base_url: str | None,
                accept: str | None, expect_status: int | None, expect_type: str | None,
                compatible: bool, timeout: float | None, insecure: bool, verbose: bool,
                raw: bool):
    """Make a request to an absolute URL or a path under the base URL.

    Examples:
        fluentrest request https://api.example.com/users
        fluentrest request /users/1 --base-url https://api.example.com -X DELETE
        fluentrest request https://api.example.com/users -X POST -d '<user name="a"/>'
        fluentrest request https://api.example.com/users --expect-status 200 --expect-type application/xml
    """
    console = Console()
    method = method.upper()

    headers = parse_headers(list(header))
    if user and ":" in user:
        headers.update(basic_auth_header(*user.split(":", 1)))
    if bearer:
        headers.update(bearer_auth_header(bearer))

    overrides: dict[str, Any] = {}
    if base_url:
        overrides["base_url"] = base_url
    if accept:
        overrides["default_accept"] = accept
    if timeout is not None:
        overrides["timeout"] = timeout
    if insecure:
        overrides["verify_ssl"] = False
    config = dataclasses.replace(get_config(), **overrides)

    client = RestClient(config)
    if ctx.obj and ctx.obj.get("debug"):
        client.debug()

    try:
        resource = client.resource(url)

        if verbose:
            console.print(f"\n[cyan]Request:[/cyan]")
            console.print(f"  {method} {resource}")
            for h_name, h_value in resource.build_headers(headers).items():
                console.print(f"  [dim]{h_name}:[/dim] {h_value}")
            console.print()

        if method == "GET":
            resp = resource.get(headers, parse_params(list(param)))
        elif method == "POST":
            resp = resource.post(data or "", headers, parse_params(list(param)))
        elif method == "PUT":
            resp = resource.put(data or "", headers, parse_params(list(param)))
        elif method == "DELETE":
            resp = resource.delete(headers, parse_params(list(param)))
        else:
            console.print(f"[red]Error:[/red] Unsupported method: {method}")
            raise SystemExit(1)

        if resp.is_success:
            status_color = "green"
        elif 300 <= resp.status < 400:
            status_color = "yellow"
        else:
            status_color = "red"
        console.print(f"[{status_color}]{resp.status} {resp.reason}[/{status_color}]")

        if verbose:
            console.print("\n[cyan]Response Headers:[/cyan]")
            for h_name, h_value in resp.headers.items():
                console.print(f"  [dim]{h_name}:[/dim] {h_value}")

        if expect_status is not None:
            resp.require_status(expect_status)
        if expect_type:
            if compatible:
                resp.require_compatible_type(expect_type)
            else:
                resp.require_content_type(expect_type)

        if resp.content:
            console.print()
            print_body(console, resp, raw)

        console.print(f"\n[dim]Content-Type: {resp.content_type or 'N/A'} | "
                      f"Size: {len(resp.content):,} bytes[/dim]")

    except RestError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)
    finally:
        client.close()


@cli.command("get")
@click.argument("url")
@click.option("-H", "--header", multiple=True, help="Headers in 'Name: Value' format")
@click.option("-p", "--param", multiple=True, help="Query params in 'name=value' format")
@click.option("--base-url", help="Base URL for relative paths")
@click.option("--accept", help="Accept header media type")
@click.option("-v", "--verbose", is_flag=True, help="Show details")
@click.pass_context
def get_cmd(ctx, url: str, header: tuple, param: tuple, base_url: str | None,
            accept: str | None, verbose: bool):
    """Make a GET request (shortcut).

    Examples:
        fluentrest get https://api.example.com/users
        fluentrest get /users --base-url https://api.example.com -p page=2 -v
    """
    ctx.invoke(request_cmd, url=url, method="GET", header=header, param=param,
               data=None, user=None, bearer=None, base_url=base_url, accept=accept,
               expect_status=None, expect_type=None, compatible=False, timeout=None,
               insecure=False, verbose=verbose, raw=False)


@cli.command("post")
@click.argument("url")
@click.option("-H", "--header", multiple=True, help="Headers")
@click.option("-d", "--data", help="Request body")
@click.option("--base-url", help="Base URL for relative paths")
@click.option("-v", "--verbose", is_flag=True, help="Show details")
@click.pass_context
def post_cmd(ctx, url: str, header: tuple, data: str | None, base_url: str | None,
             verbose: bool):
    """Make a POST request (shortcut).

    Examples:
        fluentrest post https://api.example.com/users -d '<user name="alice"/>'
    """
    ctx.invoke(request_cmd, url=url, method="POST", header=header, param=(),
               data=data, user=None, bearer=None, base_url=base_url, accept=None,
               expect_status=None, expect_type=None, compatible=False, timeout=None,
               insecure=False, verbose=verbose, raw=False)


@cli.command("put")
@click.argument("url")
@click.option("-H", "--header", multiple=True, help="Headers")
@click.option("-d", "--data", help="Request body")
@click.option("--base-url", help="Base URL for relative paths")
@click.option("-v", "--verbose", is_flag=True, help="Show details")
@click.pass_context
def put_cmd(ctx, url: str, header: tuple, data: str | None, base_url: str | None,
            verbose: bool):
    """Make a PUT request (shortcut).

    Examples:
        fluentrest put https://api.example.com/users/1 -d '<user name="bob"/>'
    """
    ctx.invoke(request_cmd, url=url, method="PUT", header=header, param=(),
               data=data, user=None, bearer=None, base_url=base_url, accept=None,
               expect_status=None, expect_type=None, compatible=False, timeout=None,
               insecure=False, verbose=verbose, raw=False)


@cli.command("delete")
@click.argument("url")
@click.option("-H", "--header", multiple=True, help="Headers")
@click.option("--base-url", help="Base URL for relative paths")
@click.option("-v", "--verbose", is_flag=True, help="Show details")
@click.pass_context
def delete_cmd(ctx, url: str, header: tuple, base_url: str | None, verbose: bool):
    """Make a DELETE request (shortcut).

    Examples:
        fluentrest delete https://api.example.com/users/1
    """
    ctx.invoke(request_cmd, url=url, method="DELETE", header=header, param=(),
               data=None, user=None, bearer=None, base_url=base_url, accept=None,
               expect_status=None, expect_type=None, compatible=False, timeout=None,
               insecure=False, verbose=verbose, raw=False)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
