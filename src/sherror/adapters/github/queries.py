"""
GraphQL documents for the GitHub Discussions API.
"""

REPOSITORY_INFO = """
query RepoInfo($owner: String!, $repo: String!, $categories: Int!) {
  repository(owner: $owner, name: $repo) {
    id
    discussionCategories(first: $categories) {
      nodes {
        id
        name
      }
    }
  }
}
"""

GET_DISCUSSION = """
query GetDiscussion($owner: String!, $repo: String!, $number: Int!) {
  repository(owner: $owner, name: $repo) {
    discussion(number: $number) {
      id
      number
      title
      body
      url
    }
  }
}
"""

LIST_DISCUSSIONS = """
query GetDiscussions($owner: String!, $repo: String!, $categoryId: ID!, $first: Int!) {
  repository(owner: $owner, name: $repo) {
    discussions(first: $first, categoryId: $categoryId) {
      nodes {
        id
        number
        title
        body
        url
      }
    }
  }
}
"""

CREATE_DISCUSSION = """
mutation CreateDiscussion($repoId: ID!, $catId: ID!, $title: String!, $body: String!) {
  createDiscussion(input: { repositoryId: $repoId, categoryId: $catId, title: $title, body: $body }) {
    discussion {
      id
      number
      title
      body
      url
    }
  }
}
"""

UPDATE_DISCUSSION = """
mutation UpdateDiscussion($id: ID!, $title: String!, $body: String!) {
  updateDiscussion(input: { discussionId: $id, title: $title, body: $body }) {
    discussion {
      id
      number
      title
      body
      url
    }
  }
}
"""

DELETE_DISCUSSION = """
mutation DeleteDiscussion($id: ID!) {
  deleteDiscussion(input: { id: $id }) {
    clientMutationId
  }
}
"""
