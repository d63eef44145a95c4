import os
import sys
import hydra
from hydra.core.config_store import ConfigStore
from omegaconf import DictConfig, OmegaConf

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from conf.config_models import AppConfig
from src.collisions.application.builder import ReportApplicationBuilder
from src.common.exceptions import CollisionReportError
from src.common.logging import set_package_level, setup_logger

cs = ConfigStore.instance()
cs.store(name="base_config", node=AppConfig)

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    logger = setup_logger("collision_report", cfg.logging.level)
    set_package_level("src", cfg.logging.level)
    logger.debug(f"Configuration:\n{OmegaConf.to_yaml(cfg)}")

    # Relative paths refer to the launch directory, not the Hydra run dir
    cfg.source.path = hydra.utils.to_absolute_path(cfg.source.path)

    builder = ReportApplicationBuilder(cfg)
    try:
        builder.build_source().build_service().load()
    except CollisionReportError as e:
        logger.error(f"Could not load collisions: {e}")
        sys.exit(1)

    service = builder.service
    k = builder.report_settings.top_k

    print(f"ZIP codes with the largest number of collisions:\n{service.zip_codes_with_most_collisions(k)}")
    print(f"ZIP codes with the fewest number of collisions:\n{service.zip_codes_with_least_collisions(k)}")
    print(f"ZIP codes with the most injuries and fatalities (combined):\n{service.zip_codes_with_most_person_incidents(k)}")
    print(f"ZIP codes with the most cyclist injuries and fatalities:\n{service.zip_codes_with_most_cyclist_incidents(k)}")
    print(f"Percentage of collisions involving certain vehicle type:\n{service.vehicle_type_stats()}")
    print(f"Fraction of collisions by hour:\n{service.hourly_stats()}")

if __name__ == "__main__":
    main()
