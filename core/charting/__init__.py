"""Chart document rendering helpers.

Charts are described by `analysis.chart_config.ChartConfig` objects. This
package turns them into standalone HTML documents for preview and download.
"""
