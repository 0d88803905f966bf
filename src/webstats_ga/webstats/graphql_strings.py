"""GraphQL documents sent to the Webstats API."""

MUTATION_CREATE_GOOGLE_ANALYTICS_STATISTIC = """
mutation CreateGoogleAnalyticsStatistic($projectId: ID!, $data: JSON!) {
  createGoogleAnalyticsStatistic(projectId: $projectId, data: $data) {
    id
  }
}
"""
