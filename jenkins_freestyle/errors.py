"""Exception classes for jenkins_freestyle errors"""


class JenkinsFreestyleException(Exception):
    pass


class ValidationError(JenkinsFreestyleException):
    """Raised when job parameters can not produce a valid job document."""


class MissingAttributeError(JenkinsFreestyleException):

    def __init__(self, missing_attribute, job_name=None):
        if job_name:
            message = "Missing {0} from job '{1}'".format(
                missing_attribute, job_name)
        else:
            message = "Missing {0} from job definition".format(
                missing_attribute)

        super(MissingAttributeError, self).__init__(message)


class DocumentError(JenkinsFreestyleException):
    pass


class FreestyleConfigException(JenkinsFreestyleException):
    pass
