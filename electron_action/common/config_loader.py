"""
Run configuration loading from action inputs
Builds the immutable RunConfig consumed by the orchestrator
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from electron_action import config
from electron_action.common.environment import ActionEnvironment
from electron_action.common.errors import ConfigurationError
from electron_action.common.manifest import ActionManifest


@dataclass(frozen=True)
class RunConfig:
    """Configuration of a single action run"""
    platform: str
    release: bool
    package_root: str
    app_root: str
    build_script_name: Optional[str]
    package_manager: str
    skip_install: bool = False
    skip_build: bool = False
    use_vue_cli: bool = False
    args: str = ""
    max_attempts: int = config.DEFAULT_MAX_ATTEMPTS
    github_token: str = field(default="", repr=False)
    mac_certs: Optional[str] = field(default=None, repr=False)
    mac_certs_password: Optional[str] = field(default=None, repr=False)
    windows_certs: Optional[str] = field(default=None, repr=False)
    windows_certs_password: Optional[str] = field(default=None, repr=False)

    def credentials_env(self) -> Dict[str, str]:
        """
        Environment variables electron-builder reads during the run

        Returns:
            Publish token, code signing certificate for mac/windows (when set)
            and the install advertisement suppression flag
        """
        env = {}
        if self.github_token:
            env[config.GH_TOKEN_VAR] = self.github_token

        if self.platform == config.PLATFORM_MAC:
            certs, password = self.mac_certs, self.mac_certs_password
        elif self.platform == config.PLATFORM_WINDOWS:
            certs, password = self.windows_certs, self.windows_certs_password
        else:
            certs, password = None, None

        if certs:
            env[config.CSC_LINK_VAR] = certs
        if password:
            env[config.CSC_KEY_PASSWORD_VAR] = password

        env[config.ADBLOCK_VAR] = "true"
        return env

    def log_summary(self, logger: logging.Logger) -> None:
        """Log the configuration without secrets"""
        logger.info("🔧 Configuration loaded:")
        logger.info(f"   Platform: {self.platform}")
        logger.info(f"   Release: {self.release}")
        logger.info(f"   Package root: {self.package_root}")
        if self.app_root != self.package_root:
            logger.info(f"   App root: {self.app_root}")
        logger.info(f"   Package manager: {self.package_manager}")
        logger.info(f"   Build script: {self.build_script_name or '-'}")
        logger.info(f"   Skip install: {self.skip_install}")
        logger.info(f"   Skip build: {self.skip_build}")
        logger.info(f"   Vue CLI: {self.use_vue_cli}")
        logger.info(f"   Max attempts: {self.max_attempts}")
        logger.info(f"   GitHub token: {'[SET]' if self.github_token else '[NOT SET]'}")
        if self.platform == config.PLATFORM_MAC:
            logger.info(f"   macOS certificate: {'[SET]' if self.mac_certs else '[NOT SET]'}")
        elif self.platform == config.PLATFORM_WINDOWS:
            logger.info(f"   Windows certificate: {'[SET]' if self.windows_certs else '[NOT SET]'}")


class ConfigLoader:
    """
    Loads the run configuration from action inputs, falling back to the
    defaults declared in action.yml when running outside the Actions runner
    """

    def __init__(self, environment: ActionEnvironment, manifest: Optional[ActionManifest] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize ConfigLoader

        Args:
            environment: Source of action inputs
            manifest: Optional action.yml whose defaults apply to local runs
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.manifest = manifest

        if manifest is not None and not environment.is_github_actions():
            self.logger.debug("Not running in GitHub Actions, applying action.yml defaults")
            environment = environment.with_input_defaults(manifest.defaults())

        self.environment = environment

    def load(self) -> RunConfig:
        """
        Resolve every input into a RunConfig

        Returns:
            RunConfig instance

        Raises:
            ConfigurationError: If a required input is missing or max_attempts is malformed
        """
        env = self.environment

        platform = env.get_platform()
        release = env.get_bool_input("release", required=True)
        package_root = env.get_input("package_root", required=True)
        build_script_name = env.get_input("build_script_name", required=True, allow_empty=True)
        skip_build = env.get_bool_input("skip_build")
        skip_install = env.get_bool_input("skip_install")
        use_vue_cli = env.get_bool_input("use_vue_cli")
        args = env.get_input("args") or ""
        max_attempts = self._parse_max_attempts(env.get_input("max_attempts"))
        package_manager = env.get_input("package_manager") or env.detect_package_manager()

        # Deprecated: electron-builder needs package.json next to the app, so
        # package_root is sufficient
        app_root = env.get_input("app_root")
        if app_root:
            self.logger.warning(f"⚠️ The `app_root` input is deprecated: {self._deprecation_message('app_root')}")
        else:
            app_root = package_root

        github_token = env.get_input("github_token", required=True)

        return RunConfig(
            platform=platform,
            release=release,
            package_root=package_root,
            app_root=app_root,
            build_script_name=build_script_name,
            package_manager=package_manager,
            skip_install=skip_install,
            skip_build=skip_build,
            use_vue_cli=use_vue_cli,
            args=args,
            max_attempts=max_attempts,
            github_token=github_token,
            mac_certs=env.get_input("mac_certs"),
            mac_certs_password=env.get_input("mac_certs_password"),
            windows_certs=env.get_input("windows_certs"),
            windows_certs_password=env.get_input("windows_certs_password"),
        )

    def _deprecation_message(self, name: str) -> str:
        message = self.manifest.deprecation_message(name) if self.manifest is not None else None
        return message or "use `package_root` instead"

    def _parse_max_attempts(self, value: Optional[str]) -> int:
        if value is None:
            return config.DEFAULT_MAX_ATTEMPTS
        try:
            attempts = int(value.strip())
        except ValueError:
            raise ConfigurationError(f'"max_attempts" must be a positive integer, got "{value}"')
        if attempts < 1:
            self.logger.warning(f"⚠️ max_attempts={attempts} is below 1, using 1")
            return 1
        return attempts
