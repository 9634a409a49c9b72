"""Kubernetes client for cluster operations."""

from pathlib import Path

from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.client.models import V1Node
from urllib3.exceptions import HTTPError

from kubecheck.core.config import ClusterConnectionConfig
from kubecheck.core.exceptions import CommunicationError, ConfigurationError
from kubecheck.utils.logging import get_logger

logger = get_logger(__name__)


class KubernetesClient:
    """Kubernetes client wrapper."""

    def __init__(self, connection: ClusterConnectionConfig | None = None):
        """Initialize Kubernetes client.

        Args:
            connection: Cluster connection configuration (optional, defaults
                to kubeconfig or in-cluster discovery)

        Raises:
            ConfigurationError: If the connection cannot be configured
        """
        self.connection = connection or ClusterConnectionConfig()
        configuration = client.Configuration()

        try:
            if self.connection.in_cluster:
                config.load_incluster_config(client_configuration=configuration)
                mode = "in_cluster"
            elif self.connection.api_server:
                configuration.host = self.connection.api_server.rstrip("/")
                mode = "explicit"
            else:
                self._configure_from_kubeconfig(configuration)
                mode = "kubeconfig"
            self._apply_connection_options(configuration)
        except (config.ConfigException, OSError) as e:
            logger.error("k8s_client_initialization_failed", error=str(e))
            raise ConfigurationError(f"Failed to initialize Kubernetes client: {e}") from e

        self.configuration = configuration
        self.api_client = client.ApiClient(configuration)
        self.core_v1 = client.CoreV1Api(self.api_client)

        logger.debug("k8s_client_initialized", mode=mode, host=configuration.host)

    def _apply_connection_options(self, configuration: client.Configuration) -> None:
        """Layer TLS and credential options over the loaded configuration.

        Applies in every mode, so a token or CA file given alongside a
        kubeconfig or service account replaces what those provided.
        """
        conn = self.connection

        if conn.ca_file:
            configuration.ssl_ca_cert = conn.ca_file
        if conn.client_cert:
            configuration.cert_file = conn.client_cert
            configuration.key_file = conn.client_key
        if conn.insecure_skip_tls_verify:
            configuration.verify_ssl = False

        if conn.user or conn.token or conn.token_file:
            # The service account loader re-reads its own token on refresh
            configuration.refresh_api_key_hook = None

        if conn.user:
            configuration.username = conn.user
            configuration.password = conn.password
            # The generated client only knows bearer auth, so basic auth
            # goes through the same header.
            configuration.api_key = {"authorization": configuration.get_basic_auth_token()}
            configuration.api_key_prefix = {}

        token = conn.token
        if conn.token_file:
            token = Path(conn.token_file).expanduser().read_text().strip()
        if token:
            configuration.api_key = {"authorization": token}
            configuration.api_key_prefix = {"authorization": "Bearer"}

    def _configure_from_kubeconfig(self, configuration: client.Configuration) -> None:
        conn = self.connection
        try:
            config.load_kube_config(
                config_file=conn.kubeconfig,
                context=conn.context,
                client_configuration=configuration,
            )
        except config.ConfigException:
            if conn.kubeconfig or conn.context:
                raise
            # No usable kubeconfig, try the service account
            config.load_incluster_config(client_configuration=configuration)

    def get_nodes(self, label_selector: str | None = None) -> list[V1Node]:
        """Get nodes in the cluster.

        Args:
            label_selector: Label selector (e.g., "node-role.kubernetes.io/worker")

        Returns:
            List of V1Node objects

        Raises:
            CommunicationError: If nodes cannot be retrieved
        """
        kwargs: dict = {}
        if label_selector:
            kwargs["label_selector"] = label_selector
        if self.connection.request_timeout:
            kwargs["_request_timeout"] = self.connection.request_timeout

        try:
            logger.debug("getting_nodes", selector=label_selector)
            response = self.core_v1.list_node(**kwargs)

        except ApiException as e:
            logger.error("get_nodes_failed", status=e.status, reason=e.reason)
            raise CommunicationError(f"Failed to get nodes: {e.status} {e.reason}") from e
        except HTTPError as e:
            logger.error("get_nodes_unreachable", error=str(e))
            raise CommunicationError(f"Failed to reach API server: {e}") from e
        except ValueError as e:
            logger.error("get_nodes_malformed_response", error=str(e))
            raise CommunicationError(f"Malformed node list response: {e}") from e

        nodes = getattr(response, "items", None)
        if nodes is None:
            logger.error("get_nodes_malformed_response", error="missing items")
            raise CommunicationError("Malformed node list response: missing items")

        logger.info("nodes_retrieved", count=len(nodes), selector=label_selector)
        return nodes
