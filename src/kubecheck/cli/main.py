"""Main CLI entry point for kubecheck."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape

from kubecheck import __version__
from kubecheck.checks.kubernetes.node_readiness import CHECK_NAME, MinimalReadyNodesCheck
from kubecheck.core.config import CheckConfig
from kubecheck.core.exceptions import ConfigurationError
from kubecheck.core.models import CheckResult, Severity
from kubecheck.interfaces.check import CheckContext
from kubecheck.utils.logging import get_logger, log_error, setup_logging

if TYPE_CHECKING:
    from kubecheck.interfaces.kubernetes_provider import KubernetesProvider

console = Console()
logger = get_logger(__name__)

SEVERITY_STYLES = {
    Severity.OK: "green",
    Severity.WARNING: "yellow",
    Severity.CRITICAL: "red",
    Severity.UNKNOWN: "magenta",
}


def run_check(config: CheckConfig, provider: KubernetesProvider | None = None) -> CheckResult:
    """Run the minimal ready nodes check for a validated configuration.

    Args:
        config: Validated configuration
        provider: Kubernetes provider (optional, built from config.connection)

    Returns:
        CheckResult; configuration and unexpected errors map to UNKNOWN
    """
    check = MinimalReadyNodesCheck(
        minimal=config.check.minimal,
        node_filter=config.check.node_filter,
    )

    try:
        if provider is None:
            from kubecheck.adapters.k8s_adapter import KubernetesAdapter

            provider = KubernetesAdapter(connection=config.connection)

        return check.execute(CheckContext(kubernetes_provider=provider))

    except ConfigurationError as e:
        logger.error("check_configuration_failed", error=str(e))
        return CheckResult(check_name=check.name, severity=Severity.UNKNOWN, message=str(e))
    except Exception as e:
        log_error(logger, e, operation="node_readiness_check")
        return CheckResult(
            check_name=check.name,
            severity=Severity.UNKNOWN,
            message=f"Check failed unexpectedly: {e}",
        )


def emit_result(result: CheckResult, output_format: str = "text") -> None:
    """Write the result to stdout.

    Text output puts the status line first, then one line per advisory.
    """
    if output_format == "json":
        print(result.model_dump_json(indent=2))
        return

    style = SEVERITY_STYLES[result.severity]
    console.print(escape(result.status_line()), style=style, soft_wrap=True, highlight=False)
    for advisory in result.advisories:
        console.print(escape(advisory), soft_wrap=True, highlight=False)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option("-s", "--api-server", envvar="KUBERNETES_MASTER", help="URL to API server")
@click.option("-v", "--api-version", help="API version. Defaults to 'v1'")
@click.option("--in-cluster", is_flag=True, help="Use service account authentication")
@click.option("--ca-file", help="CA file to verify API server cert")
@click.option("--cert", "client_cert", help="Client cert to present")
@click.option("--key", "client_key", help="Client key for the client cert")
@click.option("-u", "--user", help="User with access to API")
@click.option("-p", "--password", help="If user is passed, also pass a password")
@click.option("-t", "--token", help="Bearer token for authorization")
@click.option("--token-file", help="File containing bearer token for authorization")
@click.option("--kubeconfig", help="Path to kubeconfig file")
@click.option("--context", "kube_context", help="Kubeconfig context to use")
@click.option(
    "--insecure-skip-tls-verify", is_flag=True, help="Do not verify the API server certificate"
)
@click.option("--request-timeout", type=float, help="API request timeout in seconds")
@click.option(
    "-m", "--minimal", type=int, help="Threshold for minimal nodes ready allowed. Defaults to 1"
)
@click.option("-f", "--filter", "node_filter", help="Selector filter for nodes to be checked")
@click.option("--config", "config_path", help="Path to YAML configuration file")
@click.option(
    "--output-format", type=click.Choice(["text", "json"]), default="text", show_default=True
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
)
@click.option("--log-format", type=click.Choice(["console", "json"]))
@click.pass_context
def cli(
    ctx: click.Context,
    api_server: str | None,
    api_version: str | None,
    in_cluster: bool,
    ca_file: str | None,
    client_cert: str | None,
    client_key: str | None,
    user: str | None,
    password: str | None,
    token: str | None,
    token_file: str | None,
    kubeconfig: str | None,
    kube_context: str | None,
    insecure_skip_tls_verify: bool,
    request_timeout: float | None,
    minimal: int | None,
    node_filter: str | None,
    config_path: str | None,
    output_format: str,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Check if a minimal threshold of Kubernetes nodes are in ready to use state.

    Exits 0 (OK), 1 (WARNING), 2 (CRITICAL) or 3 (UNKNOWN).
    """
    try:
        base = CheckConfig.from_file(config_path) if config_path else CheckConfig()
        config = base.with_overrides(
            connection={
                "api_server": api_server,
                "api_version": api_version,
                # Flags only override when set
                "in_cluster": in_cluster or None,
                "ca_file": ca_file,
                "client_cert": client_cert,
                "client_key": client_key,
                "user": user,
                "password": password,
                "token": token,
                "token_file": token_file,
                "kubeconfig": kubeconfig,
                "context": kube_context,
                "insecure_skip_tls_verify": insecure_skip_tls_verify or None,
                "request_timeout": request_timeout,
            },
            check={"minimal": minimal, "node_filter": node_filter},
            logging={"level": log_level, "format": log_format},
        )
    except ConfigurationError as e:
        setup_logging()
        logger.error("configuration_invalid", error=str(e))
        result = CheckResult(check_name=CHECK_NAME, severity=Severity.UNKNOWN, message=str(e))
        emit_result(result, output_format)
        ctx.exit(result.exit_code)

    setup_logging(
        level=config.logging.level,
        format=config.logging.format,
        output=config.logging.output,
    )

    result = run_check(config)
    emit_result(result, output_format)
    ctx.exit(result.exit_code)


if __name__ == "__main__":
    cli()
