"""ec2ssh - ssh to an EC2 instance by ID, private IP or Name tag."""

__version__ = "0.1.0"
