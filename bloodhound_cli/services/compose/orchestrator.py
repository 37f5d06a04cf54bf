"""
Compose orchestrator.

Maps the named high-level operations (install, start, stop, ...) to fixed
sequences of compose invocations. A failing step raises and the remaining
steps of that operation are skipped; nothing is rolled back.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from ...config import PASSWORD_KEY, ConfigStore
from ...core.exceptions import ComposeCommandError, ConfigFileError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.models.capability import CapabilityState
from ..logging import NullLogger
from ..process import ProcessRunner
from .service_files import ServiceFileManager

LOGIN_PATH = "ui/login"
RECREATE_ADMIN_ENV = "bhe_recreate_default_admin"


class ComposeOrchestrator:
    """
    Runs compose operations against one service-definition file.

    Usage:
        orchestrator = ComposeOrchestrator(runner, capability, store, files, presenter)
        orchestrator.up(path)
    """

    def __init__(
        self,
        runner: ProcessRunner,
        capability: CapabilityState,
        store: ConfigStore,
        files: ServiceFileManager,
        presenter: IPresenter,
        logger: ILogger | None = None,
    ) -> None:
        self._runner = runner
        self._capability = capability
        self._store = store
        self._files = files
        self._presenter = presenter
        self._logger = logger or NullLogger()

    @property
    def capability(self) -> CapabilityState:
        return self._capability

    # -------------------------------------------------------------------------
    # Compose plumbing
    # -------------------------------------------------------------------------

    def compose_args(self, path: Path, *args: str) -> list[str]:
        """Arguments for ``<tool> [compose] -f <path> <args...>``."""
        return self._capability.command("-f", str(path), *args)

    def _compose(
        self,
        path: Path,
        *args: str,
        action: str,
        env: dict[str, str] | None = None,
    ) -> None:
        """Run one compose step.

        Raises:
            ComposeCommandError: If the step exits non-zero
        """
        path = path.absolute()
        result = self._runner.run(
            self._capability.executable,
            self.compose_args(path, *args),
            cwd=path.parent,
            env=env,
        )
        if not result.ok:
            raise ComposeCommandError(
                f"Error trying to {action} with {path}",
                returncode=result.returncode,
                command=result.display,
            )

    def _announce(self, action: str, path: Path) -> Path:
        self._presenter.print(f"[+] Running `{self._capability.describe()}` to {action} with {path}...")
        return self._files.ensure_exists(path)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def install(self, override: str | Path | None = None) -> Path:
        """
        First-time setup: fetch the YAML files, pull the images and start everything.

        Returns:
            The service-definition file that was used
        """
        if not override:
            self._files.fetch()
        path = self._files.ensure_exists(self._files.resolve(override))
        self._compose(path, "pull", action="pull the container images")
        self._compose(path, "up", "-d", action="bring up the environment")
        self._presenter.print_success("[+] BloodHound is ready to go!")
        self.print_login_details()
        return path

    def upgrade(self, path: Path) -> None:
        """Bring containers down, rebuild them and bring them back up."""
        self._announce("build containers", path)
        self._compose(path, "down", action="bring down any running containers")
        self._compose(path, "build", action="build")
        self._compose(path, "up", "-d", action="bring up the environment")
        self._presenter.print_success("[+] All containers have been built!")

    def start(self, path: Path) -> None:
        self._announce("start containers", path)
        self._compose(path, "start", action="start the containers")

    def stop(self, path: Path) -> None:
        self._announce("stop services", path)
        self._compose(path, "stop", action="stop services")

    def restart(self, path: Path) -> None:
        self._announce("restart containers", path)
        self._compose(path, "restart", action="restart the containers")

    def up(self, path: Path, env: dict[str, str] | None = None) -> None:
        self._announce("bring up the containers", path)
        self._compose(path, "up", "-d", action="bring up the containers", env=env)

    def down(self, path: Path, volumes: bool = False) -> None:
        """Stop and remove the containers; ``volumes`` also deletes the data volumes."""
        self._announce("bring down the containers", path)
        args = ["down"]
        if volumes:
            args.append("--volumes")
        self._compose(path, *args, action="bring down the containers")

    def pull(self, path: Path) -> None:
        self._announce("pull container images", path)
        self._compose(path, "pull", action="pull the container images")

    def uninstall(self, path: Path) -> bool:
        """
        Remove containers, images and volumes, then optionally the config directory.

        Both steps ask for confirmation first.

        Returns:
            False if the operator declined the first confirmation
        """
        if not self._presenter.confirm(
            "[!] This command removes all containers, images, and volume data. "
            "Are you sure you want to uninstall?"
        ):
            return False

        self._presenter.print("[+] Uninstalling the BloodHound containers...")
        self._files.ensure_exists(path)
        self._compose(
            path,
            "down",
            "--rmi",
            "all",
            "-v",
            "--remove-orphans",
            action="uninstall",
        )

        config_dir = self._store.config_dir
        if not self._presenter.confirm(
            f"[!] Do you want to also delete the config directory, {config_dir}, and its contents?"
        ):
            return True

        try:
            shutil.rmtree(config_dir)
        except OSError as e:
            raise ConfigFileError(
                "Error trying to delete the config directory", file_path=str(config_dir), cause=e
            ) from e
        self._presenter.print_success("[+] Successfully deleted the BloodHound config directory!")
        self._presenter.print("[+] Uninstall was successful. You can re-install with `bloodhound-cli install`.")
        self._presenter.print(
            "[+] The config directory and JSON config file will be recreated if you continue using BloodHound CLI."
        )
        return True

    def reset_admin_password(self, path: Path) -> str:
        """
        Recreate the default admin account with a new password.

        Brings the services down, stores a new password, and brings them up
        with the recreate flag set for that one ``up`` call.

        Returns:
            The new password
        """
        self.down(path)
        password = self._store.regenerate_password()
        self._logger.info("Regenerated %s", PASSWORD_KEY)
        self.up(path, env={RECREATE_ADMIN_ENV: "true"})
        self._presenter.print_success("[+] BloodHound is ready to go!")
        self.print_login_details()
        return password

    def login_url(self) -> str:
        return f"{self._store.get_string('root_url').rstrip('/')}/{LOGIN_PATH}"

    def print_login_details(self) -> None:
        self._presenter.print(
            f"[+] You can log in as `{self._store.get_string('default_admin.principal_name')}` "
            f"with this password: {self._store.get_string(PASSWORD_KEY)}"
        )
        self._presenter.print(
            "[+] You can get your admin password by running: bloodhound-cli config get default_password"
        )
        self._presenter.print(f"[+] You can access the BloodHound UI at: {self.login_url()}")
