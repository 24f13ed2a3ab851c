"""Extract, transform, load and assess in one run."""

import logging
import uuid
from typing import Optional

from src.extractors import CsvDataExtractor, JsonDataExtractor, XmlDataExtractor
from src.loaders.base import DataLoader, LoadError
from src.quality.base import QualityChecker
from src.quality.report import QualityReport
from src.transformers import DataCleaner, DataStandardizer, DataValidator
from .metrics import MetricsCollector
from .results import ExtractedData, PipelineConfig, PipelineResult, TransformedData

logger = logging.getLogger(__name__)


class EtlPipeline:
    """Runs the phases of an ETL run against one sink.

    The sink is chosen by the ``loader`` and ``quality_checker`` handed in;
    nothing in here depends on which sink it is.
    """

    def __init__(self,
                 loader: DataLoader,
                 quality_checker: QualityChecker,
                 csv_extractor: Optional[CsvDataExtractor] = None,
                 json_extractor: Optional[JsonDataExtractor] = None,
                 xml_extractor: Optional[XmlDataExtractor] = None,
                 validator: Optional[DataValidator] = None,
                 cleaner: Optional[DataCleaner] = None,
                 standardizer: Optional[DataStandardizer] = None,
                 metrics: Optional[MetricsCollector] = None):
        self.loader = loader
        self.quality_checker = quality_checker
        self.csv_extractor = csv_extractor or CsvDataExtractor()
        self.json_extractor = json_extractor or JsonDataExtractor()
        self.xml_extractor = xml_extractor or XmlDataExtractor()
        self.validator = validator or DataValidator()
        self.cleaner = cleaner or DataCleaner()
        self.standardizer = standardizer or DataStandardizer()
        self.metrics = metrics or MetricsCollector()

    def execute_full_pipeline(self, config: PipelineConfig) -> PipelineResult:
        """Run every phase; failures end up on the returned result, never raised."""
        result = PipelineResult(run_id=str(uuid.uuid4()))
        logger.info(f"Starting ETL pipeline execution - Pipeline ID: {result.run_id}")

        try:
            logger.info("Phase 1: Starting data extraction")
            with self.metrics.time_stage('extract'):
                result.extracted_data = self.extract_data(config)
            self.metrics.record_extraction_metrics(result.extracted_data)

            logger.info("Phase 2: Starting data transformation and validation")
            with self.metrics.time_stage('transform'):
                result.transformed_data = self.transform_data(result.extracted_data)
            self.metrics.record_transformation_metrics(result.transformed_data)

            logger.info("Phase 3: Starting data loading")
            try:
                with self.metrics.time_stage('load'):
                    result.load_result = self.loader.load_all_data(result.transformed_data)
            except LoadError as e:
                result.load_result = e.result
                raise
            self.metrics.record_load_metrics(result.load_result)

            logger.info("Phase 4: Running data quality assessment")
            with self.metrics.time_stage('quality'):
                result.quality_report = self.quality_checker.generate_quality_report()

            result.complete(success=True)
            logger.info(f"ETL pipeline completed successfully - Pipeline ID: {result.run_id}, "
                        f"Duration: {result.duration_ms} ms")
        except Exception as e:
            logger.exception(f"ETL pipeline failed - Pipeline ID: {result.run_id}: {e}")
            result.complete(success=False, error_message=str(e))

        self.metrics.record_run(result.success)
        return result

    def extract_data(self, config: PipelineConfig) -> ExtractedData:
        extracted = ExtractedData()

        if config.teams_csv_path is not None:
            logger.info(f"Extracting teams from CSV: {config.teams_csv_path}")
            extracted.teams = self.csv_extractor.extract_teams(config.teams_csv_path)
            logger.info(f"Extracted {len(extracted.teams)} teams from CSV")

        if config.players_json_path is not None:
            logger.info(f"Extracting players from JSON: {config.players_json_path}")
            extracted.players = self.json_extractor.extract_players(config.players_json_path)
            logger.info(f"Extracted {len(extracted.players)} players from JSON")

        if config.games_xml_path is not None:
            logger.info(f"Extracting games from XML: {config.games_xml_path}")
            extracted.games = self.xml_extractor.extract_games(config.games_xml_path)
            logger.info(f"Extracted {len(extracted.games)} games from XML")

        return extracted

    def transform_data(self, extracted: ExtractedData) -> TransformedData:
        """Validate, clean and standardize each extracted kind in turn."""
        transformed = TransformedData()
        self.cleaner.clear_log()

        if extracted.teams is not None:
            validated = self.validator.validate_teams(extracted.teams)
            cleaned = self.cleaner.clean_teams(validated.valid_records)
            transformed.teams = self.standardizer.standardize_teams(cleaned.records)
            self._tally(transformed, validated, cleaned)
            logger.info(f"Processed teams: {len(extracted.teams)} -> {len(transformed.teams)} valid")

        if extracted.players is not None:
            validated = self.validator.validate_players(extracted.players)
            cleaned = self.cleaner.clean_players(validated.valid_records)
            transformed.players = self.standardizer.standardize_players(cleaned.records)
            self._tally(transformed, validated, cleaned)
            logger.info(f"Processed players: {len(extracted.players)} -> {len(transformed.players)} valid")

        if extracted.games is not None:
            validated = self.validator.validate_games(extracted.games)
            cleaned = self.cleaner.clean_games(validated.valid_records)
            transformed.games = self.standardizer.standardize_games(cleaned.records)
            self._tally(transformed, validated, cleaned)
            logger.info(f"Processed games: {len(extracted.games)} -> {len(transformed.games)} valid")

        return transformed

    @staticmethod
    def _tally(transformed: TransformedData, validated, cleaned) -> None:
        transformed.validation_errors += validated.error_count
        transformed.validation_warnings += validated.warning_count
        transformed.duplicates_removed += cleaned.duplicates_removed

    def generate_quality_report(self) -> QualityReport:
        return self.quality_checker.generate_quality_report()
