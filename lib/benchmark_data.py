"""Benchmark dataset for the Docker deployment docs.

Fixed results of running the same Laravel application in five PHP
environments. Both metrics use the same environment labels in the same
order, so the two charts share one category axis.
"""

from typing import Tuple

from lib.chart_config import ChartSpec, MetricSample

ENVIRONMENT_LABELS: Tuple[str, ...] = (
    'Laravel Herd',
    'ramaid/image:php8.3-fullstack-http',
    'ramaid/image:php8.3-franken',
    'jaygaha/laravel-11-frankenphp-docker',
    'ramaid/image:php8.3-franken with Laravel Octane',
)

# Requests per second, higher is better
THROUGHPUT_SAMPLES: Tuple[MetricSample, ...] = (
    MetricSample('Laravel Herd', 194.39),
    MetricSample('ramaid/image:php8.3-fullstack-http', 528.84),
    MetricSample('ramaid/image:php8.3-franken', 471.79),
    MetricSample('jaygaha/laravel-11-frankenphp-docker', 118.91),
    MetricSample('ramaid/image:php8.3-franken with Laravel Octane', 1659.9),
)

# Request duration in milliseconds, lower is better
LATENCY_SAMPLES: Tuple[MetricSample, ...] = (
    MetricSample('Laravel Herd', 14.58),
    MetricSample('ramaid/image:php8.3-fullstack-http', 4.7),
    MetricSample('ramaid/image:php8.3-franken', 5.28),
    MetricSample('jaygaha/laravel-11-frankenphp-docker', 12.74),
    MetricSample('ramaid/image:php8.3-franken with Laravel Octane', 1.49),
)

THROUGHPUT_SPEC = ChartSpec(
    orientation='vertical',
    value_axis_title='Requests per Second (req/s)',
    category_axis_title='Setup Environment',
    title='Perbandingan Requests per Second (req/s)',
    series_label='Requests per Second (req/s), higher is better',
    higher_is_better=True,
)

LATENCY_SPEC = ChartSpec(
    orientation='horizontal',
    value_axis_title='Request Duration (ms)',
    category_axis_title='Setup Environment',
    title='Perbandingan Response Time (Request Duration)',
    series_label='Request Duration (ms), lower is better',
    higher_is_better=False,
)
